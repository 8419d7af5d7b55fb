from __future__ import annotations

from fastapi import Request

from src.application.interfaces.media import DeletionQueue, UploadSigner


def get_upload_signer(request: Request) -> UploadSigner:
    signer = getattr(request.app.state, "upload_signer", None)
    if signer is None:
        raise RuntimeError("Upload signer not configured")
    return signer


def get_deletion_queue(request: Request) -> DeletionQueue:
    queue = getattr(request.app.state, "deletion_queue", None)
    if queue is None:
        raise RuntimeError("Deletion queue not configured")
    return queue
