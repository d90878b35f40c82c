"""JSON response helpers."""

from pydantic import BaseModel
from fastapi.responses import JSONResponse


# Every route is evaluated per request; nothing may be cached downstream
NO_STORE_HEADERS = {"Cache-Control": "no-store"}


def envelope_response(
    body: BaseModel,
    status_code: int = 200,
    exclude_none: bool = False
) -> JSONResponse:
    """
    Serialize an envelope model into an uncached JSON response.

    Args:
        body: Envelope model (success or failure)
        status_code: HTTP status code
        exclude_none: Drop fields that are None

    Returns:
        JSONResponse instance
    """
    return JSONResponse(
        content=body.model_dump(mode="json", by_alias=True, exclude_none=exclude_none),
        status_code=status_code,
        headers=NO_STORE_HEADERS
    )
