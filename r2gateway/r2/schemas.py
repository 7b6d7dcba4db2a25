"""Object metadata as reported by the storage proxy.

Field names on the wire are camelCase. Values are taken exactly as the
service returns them; nothing here normalizes or cross-checks fields.
"""

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt
from typing import Dict, Optional


class R2HttpMetadata(BaseModel):
    """HTTP headers stored alongside the object. Any of them may be unset."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    content_type: Optional[str] = Field(default=None, alias="contentType")
    content_language: Optional[str] = Field(default=None, alias="contentLanguage")
    content_disposition: Optional[str] = Field(default=None, alias="contentDisposition")
    content_encoding: Optional[str] = Field(default=None, alias="contentEncoding")
    cache_control: Optional[str] = Field(default=None, alias="cacheControl")
    cache_expiry: Optional[str] = Field(default=None, alias="cacheExpiry")


class R2Range(BaseModel):
    """Partial-content range reported for the object."""
    model_config = ConfigDict(frozen=True)

    offset: Optional[NonNegativeInt] = None
    length: Optional[NonNegativeInt] = None
    suffix: Optional[NonNegativeInt] = None


class R2Object(BaseModel):
    """Metadata record returned by a head request."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    key: str
    version: str
    size: NonNegativeInt
    etag: str
    http_etag: str = Field(alias="httpEtag")
    uploaded: str
    http_metadata: R2HttpMetadata = Field(alias="httpMetadata")
    custom_metadata: Dict[str, str] = Field(alias="customMetadata")
    range: R2Range
