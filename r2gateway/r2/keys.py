"""Storage key layout for the objects the gateway writes.

Identifiers are interpolated as-is; they must already be safe path segments.
"""


def tweet_image_key(tweet_id: str, image_id: str) -> str:
    return f"twitter/{tweet_id}/{image_id}.png"


def upload_image_key(sha: str) -> str:
    return f"upload/{sha}.png"


def translation_mask_key(task_id: str) -> str:
    return f"mask/{task_id}.png"


def pixiv_image_key(artwork_id: int, page: int) -> str:
    return f"pixiv/{artwork_id}/{page}.png"
