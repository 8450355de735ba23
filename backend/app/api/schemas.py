from typing import List

from pydantic import BaseModel, StrictStr, TypeAdapter

# A request body is a bare JSON array of [source, target] pairs.
SegmentsPayload = TypeAdapter(List[List[StrictStr]])


class CalculateResponse(BaseModel):
    short_path: List[str]
    full_path: List[str]


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    service: str
