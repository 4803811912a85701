"""API routes implementation."""

from fastapi import APIRouter, Request
from datetime import datetime, timezone

from .schemas import ForwardedResponse, HealthResponse
from forwarded.lib.extractors import Field

router = APIRouter()


@router.get(
    "/forwarded",
    response_model=ForwardedResponse,
    response_model_by_alias=True,
    summary="Inspect forwarding information",
    description="Return the by/for/host/proto values extracted from this request's headers.",
)
async def get_forwarded(request: Request):
    """Report what the configured extractor sees for this request."""
    extractor = request.app.state.extractor
    headers = request.headers

    return ForwardedResponse(
        by=extractor.get(Field.BY, headers),
        for_=extractor.get(Field.FOR, headers),
        host=extractor.get(Field.HOST, headers),
        proto=extractor.get(Field.PROTO, headers),
        client=request.client.host if request.client else None,
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
    )
