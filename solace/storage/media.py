"""
Local media storage for uploaded memorial photos.
Files live under settings.media_root and are served from settings.media_url.
"""

import logging
from pathlib import Path

from fastapi.concurrency import run_in_threadpool

from solace.config import get_settings

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "image/gif": "gif",
}


def media_root() -> Path:
    return Path(get_settings().media_root)


async def save_file(relative_path: str, data: bytes) -> str:
    """Write bytes under the media root and return the public URL."""
    target = media_root() / relative_path
    target.parent.mkdir(parents=True, exist_ok=True)
    await run_in_threadpool(target.write_bytes, data)
    logger.info("Stored media file %s (%d bytes)", relative_path, len(data))
    return f"{get_settings().media_url.rstrip('/')}/{relative_path}"
