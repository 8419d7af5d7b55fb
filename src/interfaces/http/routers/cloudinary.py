from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from src.application.interfaces.media import DeletionQueue, UploadSigner
from src.application.use_cases.uploads import request_deletion, request_upload_signature
from src.domain.value_objects.public_id import MIN_PUBLIC_ID_LENGTH
from src.interfaces.http.deps import get_deletion_queue, get_upload_signer
from src.interfaces.http.schemas.cloudinary import (
    DeletionResponse,
    UploadSignatureRequest,
    UploadSignatureResponse,
)

router = APIRouter(prefix="/cloudinary", tags=["cloudinary"])


@router.post("", response_model=UploadSignatureResponse)
@router.post("/", response_model=UploadSignatureResponse, include_in_schema=False)
async def request_upload_signature_route(
    payload: UploadSignatureRequest,
    *,
    signer: UploadSigner = Depends(get_upload_signer),
):
    descriptor = request_upload_signature.execute(
        request_upload_signature.RequestUploadSignatureInput(
            filename=payload.filename, format=payload.format
        ),
        signer,
    )
    return UploadSignatureResponse(cloudinary=descriptor.url)


@router.delete("", response_model=DeletionResponse, response_model_by_alias=True)
@router.delete(
    "/", response_model=DeletionResponse, response_model_by_alias=True, include_in_schema=False
)
async def request_deletion_route(
    public_id: str = Query(..., alias="publicId", min_length=MIN_PUBLIC_ID_LENGTH),
    *,
    queue: DeletionQueue = Depends(get_deletion_queue),
):
    ack = await request_deletion.execute(public_id, queue)
    return DeletionResponse(public_id=ack.public_id)
