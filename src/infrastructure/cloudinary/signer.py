from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable
from urllib.parse import urlencode

import cloudinary.utils

from src.application.errors import UpstreamError
from src.domain.models.upload import SignedUploadDescriptor
from src.domain.value_objects.image_format import ALLOWED_FORMATS
from src.domain.value_objects.public_id import build_public_id


@dataclass(slots=True)
class CloudinaryUploadSigner:
    bucket: str
    folder: str
    api_key: str
    api_secret: str
    allowed_formats: tuple[str, ...] = ALLOWED_FORMATS
    api_base_url: str = "https://api.cloudinary.com/v1_1"
    clock: Callable[[], float] = field(default=time.time, repr=False)

    @property
    def upload_endpoint(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/{self.bucket}/image/upload/"

    def signed_params(self, public_id: str, timestamp: int) -> dict[str, object]:
        """Parameters covered by the signature; the URL must carry the same values."""
        return {
            "folder": self.folder,
            "public_id": public_id,
            "allowed_formats": list(self.allowed_formats),
            "timestamp": timestamp,
        }

    def sign(self, filename: str) -> SignedUploadDescriptor:
        timestamp = int(self.clock())
        public_id = build_public_id(filename)
        try:
            signature = cloudinary.utils.api_sign_request(
                self.signed_params(public_id, timestamp), self.api_secret
            )
        except Exception as exc:
            raise UpstreamError("Failed to sign Cloudinary upload request") from exc

        query = urlencode(
            {
                "folder": self.folder,
                "api_key": self.api_key,
                "public_id": public_id,
                "allowed_formats": ",".join(self.allowed_formats),
                "signature": signature,
                "timestamp": str(timestamp),
            }
        )
        return SignedUploadDescriptor(
            url=f"{self.upload_endpoint}?{query}",
            public_id=public_id,
            timestamp=timestamp,
            signature=signature,
        )
