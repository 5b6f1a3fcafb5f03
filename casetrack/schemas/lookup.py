"""Tribunal / phase / status API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class LookupWriteRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)


class LookupResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
