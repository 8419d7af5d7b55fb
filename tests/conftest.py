from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("CLOUDINARY_BUCKET", "demo-bucket")
os.environ.setdefault("CLOUDINARY_FOLDER", "uploads")
os.environ.setdefault("CLOUDINARY_KEY", "123456789012345")
os.environ.setdefault("CLOUDINARY_SECRET", "env-secret")
os.environ.setdefault("BEARER_TOKEN", "env-token")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.domain.models.upload import QueueAck, SignedUploadDescriptor
from src.infrastructure.cloudinary.signer import CloudinaryUploadSigner
from src.interfaces.http.main import create_app

TEST_TOKEN = "test-bearer-token"
TEST_SECRET = "test-cloudinary-secret"


class StubDeletionQueue:
    def __init__(self) -> None:
        self.submitted: list[str] = []

    async def submit(self, public_id: str) -> QueueAck:
        self.submitted.append(public_id)
        return QueueAck(
            job_id=f"job-{len(self.submitted)}", job_name="destroy", public_id=public_id
        )


class SpySigner:
    def __init__(self, inner: CloudinaryUploadSigner) -> None:
        self.inner = inner
        self.calls: list[str] = []

    def sign(self, filename: str) -> SignedUploadDescriptor:
        self.calls.append(filename)
        return self.inner.sign(filename)


@pytest.fixture()
def test_settings() -> Settings:
    return Settings.model_validate(
        {
            "cloudinary_bucket": "demo-bucket",
            "cloudinary_folder": "uploads",
            "cloudinary_key": "123456789012345",
            "cloudinary_secret": TEST_SECRET,
            "bearer_token": TEST_TOKEN,
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
def deletion_queue() -> StubDeletionQueue:
    return StubDeletionQueue()


@pytest.fixture()
def upload_signer(test_settings: Settings) -> SpySigner:
    return SpySigner(
        CloudinaryUploadSigner(
            bucket=test_settings.cloudinary_bucket,
            folder=test_settings.cloudinary_folder,
            api_key=test_settings.cloudinary_key,
            api_secret=test_settings.cloudinary_secret.get_secret_value(),
        )
    )


@pytest.fixture()
def app(test_settings: Settings, upload_signer: SpySigner, deletion_queue: StubDeletionQueue):
    return create_app(
        settings=test_settings, upload_signer=upload_signer, deletion_queue=deletion_queue
    )


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture()
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {TEST_TOKEN}"}
