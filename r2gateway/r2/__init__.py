"""R2 storage module: proxy client, metadata schemas and key layout."""

from .client import R2Client, R2Config
from .keys import pixiv_image_key, translation_mask_key, tweet_image_key, upload_image_key
from .schemas import R2HttpMetadata, R2Object, R2Range

__all__ = [
    "R2Client",
    "R2Config",
    "R2HttpMetadata",
    "R2Object",
    "R2Range",
    "pixiv_image_key",
    "translation_mask_key",
    "tweet_image_key",
    "upload_image_key",
]
