from fastapi import FastAPI

from r2gateway.config.logger import configure_logging, get_logger
from r2gateway.config.settings import settings

from r2gateway.r2.deps import r2_client
from r2gateway.r2.router import router as r2_router

configure_logging(level=settings.logging.level, fmt=settings.logging.format)
logger = get_logger(__name__)

app = FastAPI(
    title=settings.title,
    description=settings.description,
    version=settings.version,
    debug=settings.debug,
)


@app.on_event("startup")
async def startup_event():
    logger.info("Starting %s v%s", settings.title, settings.version)


@app.get("/health", tags=["Main"])
async def root():
    return {"app": settings.title, "version": settings.version, "status": "running"}


app.include_router(r2_router)


@app.on_event("shutdown")
async def shutdown_event():
    await r2_client.aclose()
    logger.info("Application shutdown, R2 client closed")
