import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from playforge.config import Settings
from playforge.dependencies import get_settings
from playforge.models.response import ErrorResponse, SaveResponse
from playforge.models.save_request import SaveRequest
from playforge.services.generator import require_slug
from playforge.services.slug import slug_to_filename, slug_url
from playforge.services.storage import save_html

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/save",
    response_model=SaveResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Save an HTML page under a slug",
)
async def save(body: SaveRequest, settings: Settings = Depends(get_settings)) -> SaveResponse:
    """Persist *html* as ``<slug>.html``; an existing page with the same slug is replaced."""
    logger.info(
        "Save request received (html %d chars, slug %d chars)", len(body.html), len(body.slug)
    )

    try:
        slug = require_slug(body.slug)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    filename = slug_to_filename(slug)
    started_at = time.perf_counter()
    try:
        save_html(body.html, filename, settings.content_dir)
    except OSError as exc:
        logger.error("Saving %s failed: %s", filename, exc)
        raise HTTPException(status_code=500, detail="Failed to save the generated page.")

    logger.info(
        "Page saved as %s in %d ms", filename, int((time.perf_counter() - started_at) * 1000)
    )
    return SaveResponse(url=slug_url(slug), slug=slug)
