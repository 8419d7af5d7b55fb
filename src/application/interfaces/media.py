from __future__ import annotations

from typing import Protocol

from src.domain.models.upload import QueueAck, SignedUploadDescriptor


class UploadSigner(Protocol):
    def sign(self, filename: str) -> SignedUploadDescriptor: ...


class DeletionQueue(Protocol):
    async def submit(self, public_id: str) -> QueueAck: ...


class AssetRemover(Protocol):
    def destroy(self, public_id: str) -> None: ...
