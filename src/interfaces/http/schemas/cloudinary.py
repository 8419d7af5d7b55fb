from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UploadSignatureRequest(BaseModel):
    filename: str
    format: str = Field(min_length=3, max_length=3)

    @field_validator("filename", "format", mode="before")
    @classmethod
    def trim_and_lower(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class UploadSignatureResponse(BaseModel):
    cloudinary: str


class DeletionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    public_id: str = Field(alias="publicId")


class VersionResponse(BaseModel):
    version: str
