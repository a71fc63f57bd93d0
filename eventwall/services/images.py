"""Validate, resize and store uploaded images."""
import asyncio
import io
import logging
import os
import uuid
from dataclasses import dataclass

from fastapi import UploadFile
from PIL import Image, ImageOps, UnidentifiedImageError

from eventwall.config import settings
from eventwall.utils.exceptions import InvalidImageError, PayloadTooLargeError

logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/uploads"


@dataclass(frozen=True)
class ImageProfile:
    max_size: tuple[int, int]
    format: str
    extension: str
    quality: int


PHOTO_PROFILE = ImageProfile(max_size=(1200, 1200), format="JPEG", extension="jpg", quality=85)
BACKGROUND_PROFILE = ImageProfile(max_size=(1920, 1080), format="JPEG", extension="jpg", quality=90)
LOGO_PROFILE = ImageProfile(max_size=(400, 400), format="PNG", extension="png", quality=95)


def process_image(data: bytes, profile: ImageProfile) -> bytes:
    """Fit the image inside the profile bounds (never enlarging) and re-encode it."""
    try:
        with Image.open(io.BytesIO(data)) as source:
            img = ImageOps.exif_transpose(source)
            img.thumbnail(profile.max_size)
            if profile.format == "JPEG" and img.mode != "RGB":
                img = img.convert("RGB")
            buffer = io.BytesIO()
            img.save(buffer, format=profile.format, quality=profile.quality)
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidImageError(f"Unreadable image: {e}") from e
    return buffer.getvalue()


async def store_upload(file: UploadFile, profile: ImageProfile) -> str:
    """Process an uploaded image and write it to disk; returns its public path."""
    content_type = (file.content_type or "").lower()
    if not content_type.startswith("image/"):
        raise InvalidImageError(f"{file.filename or 'upload'}: only image files are allowed")

    content = await file.read()
    if len(content) > settings.max_upload_size_bytes:
        raise PayloadTooLargeError(f"{file.filename or 'upload'}: file exceeds the upload size limit")

    processed = await asyncio.to_thread(process_image, content, profile)

    os.makedirs(settings.upload_dir, exist_ok=True)
    filename = f"{uuid.uuid4().hex}.{profile.extension}"
    with open(os.path.join(settings.upload_dir, filename), "wb") as f:
        f.write(processed)

    logger.info("Stored upload %s (%d -> %d bytes)", filename, len(content), len(processed))
    return f"{UPLOAD_URL_PREFIX}/{filename}"
