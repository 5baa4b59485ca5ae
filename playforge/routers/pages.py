"""Browser-facing pages: saved games and the studio UI."""

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse, HTMLResponse

from playforge.config import Settings
from playforge.dependencies import get_settings
from playforge.models.response import ErrorResponse
from playforge.services.renderer import render_framed, render_not_found
from playforge.services.slug import GENERATED_PREFIX, page_slug, slug_to_filename
from playforge.services.storage import read_html

logger = logging.getLogger(__name__)

STUDIO_PAGE = Path(__file__).resolve().parent.parent / "static" / "studio.html"

router = APIRouter(tags=["Pages"])


def _load(slug: str, settings: Settings) -> Optional[str]:
    safe = page_slug(slug)
    if not safe:
        return None
    return read_html(slug_to_filename(safe), settings.content_dir)


@router.get(
    GENERATED_PREFIX + "/{slug}",
    response_class=HTMLResponse,
    summary="Play a saved game",
)
async def generated_page(slug: str, settings: Settings = Depends(get_settings)) -> HTMLResponse:
    """Serve a saved page inside a sandboxed iframe (or raw, per configuration).

    A slug without a stored page renders a plain "Not found" page with a 404.
    """
    html = _load(slug, settings)
    if html is None:
        logger.info("No generated page for slug %s", slug)
        return HTMLResponse(render_not_found(slug), status_code=404)
    if settings.page_render_mode == "raw":
        return HTMLResponse(html)
    return HTMLResponse(render_framed(html, page_slug(slug)))


@router.get(
    GENERATED_PREFIX + "/{slug}/raw",
    response_class=HTMLResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Fetch the stored HTML of a saved game",
)
async def generated_page_raw(slug: str, settings: Settings = Depends(get_settings)) -> HTMLResponse:
    html = _load(slug, settings)
    if html is None:
        raise HTTPException(status_code=404, detail=f"No generated page found for slug: {slug}")
    return HTMLResponse(html)


@router.get("/studio", response_class=FileResponse, summary="Game studio UI")
async def studio() -> FileResponse:
    return FileResponse(STUDIO_PAGE, media_type="text/html")
