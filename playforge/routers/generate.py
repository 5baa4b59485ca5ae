import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException
from openai import OpenAIError

from playforge.config import Settings
from playforge.dependencies import get_model_client, get_settings
from playforge.models.generate_request import GenerateRequest
from playforge.models.generate_response import GenerateResponse
from playforge.models.response import ErrorResponse
from playforge.services.generator import generate_game
from playforge.services.model_client import ModelClient

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/generate",
    response_model=GenerateResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Generate an HTML game from a prompt",
    description=(
        "Sends the prompt (and optional reference image) to the model and "
        "extracts the HTML document from its reply.\n\n"
        "With a `slug` the page is saved and `{url, slug}` is returned; "
        "without one the HTML itself is returned for in-browser preview."
    ),
)
async def generate(
    body: GenerateRequest,
    settings: Settings = Depends(get_settings),
    model_client: ModelClient = Depends(get_model_client),
) -> GenerateResponse:
    logger.info(
        "Generate request received (prompt %d chars, image %s, local path %s, slug %s)",
        len(body.prompt),
        (body.image_data_url or "")[:32] or "none",
        bool(body.image_local_path),
        bool(body.slug),
    )

    try:
        result = await generate_game(body, settings, model_client)
    except ValueError as exc:
        logger.warning("Rejected generate request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))
    except (OpenAIError, httpx.HTTPError) as exc:
        logger.error("Generation failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc) or "Model request failed.")
    except OSError as exc:
        logger.error("Saving generated page failed: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to save the generated page.")

    if result.slug is None:
        return GenerateResponse(html=result.html)
    return GenerateResponse(url=result.url, slug=result.slug)
