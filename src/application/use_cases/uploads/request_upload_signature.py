from __future__ import annotations

from dataclasses import dataclass

from src.application.errors import ValidationError
from src.application.interfaces.media import UploadSigner
from src.domain.models.upload import SignedUploadDescriptor
from src.domain.value_objects.image_format import ensure_allowed_format


@dataclass(slots=True)
class RequestUploadSignatureInput:
    filename: str
    format: str


def execute(payload: RequestUploadSignatureInput, signer: UploadSigner) -> SignedUploadDescriptor:
    try:
        ensure_allowed_format(payload.format)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc
    return signer.sign(payload.filename.strip().lower())
