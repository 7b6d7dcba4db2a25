"""Tests for storage key layout."""

from r2gateway.r2.keys import (
    pixiv_image_key,
    translation_mask_key,
    tweet_image_key,
    upload_image_key,
)


class TestKeys:

    def test_tweet_image_key(self):
        assert tweet_image_key("1700000000000000000", "F1a2b3") == "twitter/1700000000000000000/F1a2b3.png"

    def test_upload_image_key(self):
        assert upload_image_key("abc123") == "upload/abc123.png"

    def test_translation_mask_key(self):
        assert translation_mask_key("task-42") == "mask/task-42.png"

    def test_pixiv_image_key(self):
        assert pixiv_image_key(12345, 3) == "pixiv/12345/3.png"

    def test_pixiv_image_key_large_artwork_id(self):
        assert pixiv_image_key(2**62, 0) == f"pixiv/{2**62}/0.png"
