import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from backend.app.api.schemas import CalculateResponse, ErrorResponse, SegmentsPayload
from backend.app.dependencies import get_path_service
from backend.app.services.path_service import PathService
from flightpath.errors import FlightpathError

router = APIRouter()


def _bad_request(message: str) -> JSONResponse:
    logging.getLogger("flightpath.api").info("rejected calculate request: %s", message)
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.get(
    "",
    response_model=CalculateResponse,
    responses={400: {"model": ErrorResponse}},
)
async def calculate(
    request: Request,
    service: PathService = Depends(get_path_service),
):
    """
    Longest path through the segments given as a JSON array of
    [source, target] pairs in the request body.
    """
    body = await request.body()
    if not body:
        return _bad_request("empty payload")

    try:
        segments = SegmentsPayload.validate_json(body)
    except ValidationError:
        return _bad_request("wrong payload")

    try:
        result = await run_in_threadpool(service.calculate, segments)
    except FlightpathError as exc:
        return _bad_request(str(exc))

    return CalculateResponse(
        short_path=result.short_path,
        full_path=result.full_path,
    )
