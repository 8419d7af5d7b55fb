from __future__ import annotations

import logging
from dataclasses import dataclass

import cloudinary.uploader

from src.application.errors import UpstreamError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CloudinaryAssetRemover:
    """Server side delete-by-identifier, credentials passed per call."""

    cloud_name: str
    api_key: str
    api_secret: str

    def destroy(self, public_id: str) -> None:
        try:
            response = cloudinary.uploader.destroy(
                public_id,
                invalidate=True,
                cloud_name=self.cloud_name,
                api_key=self.api_key,
                api_secret=self.api_secret,
            )
        except Exception as exc:
            raise UpstreamError(
                f"Cloudinary destroy failed for {public_id}: {exc}",
                details={"publicId": public_id},
            ) from exc
        logger.debug("Cloudinary destroy %s -> %s", public_id, response)
