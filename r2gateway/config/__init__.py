from .settings import Settings, settings
from .logger import configure_logging, get_logger

__all__ = ["Settings", "settings", "configure_logging", "get_logger"]
