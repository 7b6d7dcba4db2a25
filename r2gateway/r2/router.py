"""FastAPI router for R2 storage operations."""

import httpx

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile
from fastapi.responses import Response
from pydantic import BaseModel

from r2gateway.config.logger import get_logger
from r2gateway.r2.client import R2Client
from r2gateway.r2.deps import get_r2_client, require_secret
from r2gateway.r2.schemas import R2Object

logger = get_logger(__name__)
router = APIRouter(prefix="/r2", tags=["R2"])


# =======================
# Request/Response Models
# =======================
class R2UploadResponse(BaseModel):
    """Response after uploading an object."""
    key: str
    size: int
    url: str


class R2DeleteResponse(BaseModel):
    """Response after deleting an object."""
    key: str
    deleted: bool


class R2PublicUrl(BaseModel):
    """Public, unauthenticated link to an object."""
    key: str
    url: str


def _upstream_error(action: str, key: str, e: httpx.HTTPError) -> HTTPException:
    if isinstance(e, httpx.HTTPStatusError):
        detail = f"Error {action} {key}: upstream returned {e.response.status_code}"
    else:
        detail = f"Error {action} {key}: {e}"
    logger.error(detail)
    return HTTPException(status_code=502, detail=detail)


# =======================
# GET Endpoints
# =======================
@router.get(
    "/object-info",
    response_model=R2Object,
    response_model_by_alias=True,
    dependencies=[Depends(require_secret)],
)
async def get_object_info(
    key: str = Query(..., description="Object key"),
    r2: R2Client = Depends(get_r2_client),
):
    """Get object metadata; 404 when the store reports no usable record."""
    try:
        obj = await r2.head(key)
    except httpx.HTTPError as e:
        raise _upstream_error("reading metadata for", key, e)
    if obj is None:
        raise HTTPException(status_code=404, detail=f"Object not found: {key}")
    return obj


@router.get("/download", dependencies=[Depends(require_secret)])
async def download_object(
    key: str = Query(..., description="Object key"),
    r2: R2Client = Depends(get_r2_client),
):
    """Return the raw object body as served by the store."""
    try:
        data = await r2.get(key)
    except httpx.HTTPError as e:
        raise _upstream_error("downloading", key, e)
    return Response(content=data, media_type="application/octet-stream")


@router.get("/public-url", response_model=R2PublicUrl)
async def get_public_url(
    key: str = Query(..., description="Object key"),
    r2: R2Client = Depends(get_r2_client),
):
    return {"key": key, "url": r2.public_url(key)}


# =======================
# PUT Endpoints
# =======================
@router.put("/upload", response_model=R2UploadResponse, dependencies=[Depends(require_secret)])
async def upload_object(
    key: str = Query(..., description="Object key"),
    file: UploadFile = File(..., description="File to upload"),
    r2: R2Client = Depends(get_r2_client),
):
    content = await file.read()
    try:
        await r2.put(key, content)
    except httpx.HTTPError as e:
        raise _upstream_error("uploading", key, e)
    return {"key": key, "size": len(content), "url": r2.public_url(key)}


# =======================
# DELETE Endpoints
# =======================
@router.delete("/delete", response_model=R2DeleteResponse, dependencies=[Depends(require_secret)])
async def delete_object(
    key: str = Query(..., description="Object key"),
    r2: R2Client = Depends(get_r2_client),
):
    try:
        await r2.delete(key)
    except httpx.HTTPError as e:
        raise _upstream_error("deleting", key, e)
    return {"key": key, "deleted": True}


__all__ = ["router"]
