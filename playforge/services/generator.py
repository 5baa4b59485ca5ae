"""Prompt-to-page generation flow shared by the HTTP layer."""

import logging
import time
from dataclasses import dataclass
from typing import List, Optional

from playforge.config import Settings
from playforge.models.conversation import ContentPart, Conversation, ImagePart, Message, TextPart
from playforge.models.generate_request import GenerateRequest
from playforge.services.extractor import extract_html, extract_title
from playforge.services.model_client import ModelClient
from playforge.services.prompts import (
    IMAGE_PLACEHOLDER,
    image_placeholder_instruction,
    local_path_instruction,
)
from playforge.services.slug import generate_random_slug, sanitize_slug, slug_to_filename, slug_url
from playforge.services.storage import save_html

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    html: str
    duration_ms: int
    slug: Optional[str] = None
    url: Optional[str] = None


def require_slug(value: str) -> str:
    """Sanitise *value* and raise ValueError if nothing usable is left."""
    slug = sanitize_slug(value)
    if not slug:
        raise ValueError("`slug` must contain at least one letter, digit, '-' or '_'")
    return slug


def resolve_slug(requested: Optional[str], auto_slug: bool) -> Optional[str]:
    """Return the slug a generation should be saved under, or *None* for preview only."""
    if requested is not None and requested.strip():
        return require_slug(requested)
    if auto_slug:
        return generate_random_slug()
    return None


def build_conversation(
    body: GenerateRequest, system_prompt: str, *, image_hint: bool = True
) -> Conversation:
    """Assemble the system + user messages for one generation request.

    User parts, in order: the prompt, the placeholder instruction (image
    attached and *image_hint* on), the local-path instruction (non-blank path)
    and finally the image itself.
    """
    parts: List[ContentPart] = [TextPart(text=body.prompt)]
    if body.image_data_url and image_hint:
        parts.append(TextPart(text=image_placeholder_instruction()))
    if body.image_local_path and body.image_local_path.strip():
        parts.append(TextPart(text=local_path_instruction(body.image_local_path)))
    if body.image_data_url:
        parts.append(ImagePart(image_url=body.image_data_url))

    return Conversation(
        messages=[
            Message(role="system", content=[TextPart(text=system_prompt)]),
            Message(role="user", content=parts),
        ]
    )


async def generate_game(
    body: GenerateRequest, settings: Settings, model_client: ModelClient
) -> GenerationResult:
    """Run the full generation flow for *body*.

    The slug is resolved before the model is called so an unusable slug
    never costs an upstream request.

    Raises:
        ValueError: if the requested slug sanitises to an empty string.
        openai.OpenAIError, httpx.HTTPError: on upstream failures.
        OSError: if the page cannot be written.
    """
    slug = resolve_slug(body.slug, settings.auto_slug)
    conversation = build_conversation(
        body, settings.system_prompt_text, image_hint=settings.image_placeholder_hint
    )

    started_at = time.perf_counter()
    reply = await model_client.get_output_text(conversation)
    html = extract_html(reply)
    if body.image_data_url and settings.substitute_image_placeholder:
        html = html.replace(IMAGE_PLACEHOLDER, body.image_data_url)
    duration_ms = int((time.perf_counter() - started_at) * 1000)
    logger.info(
        "Generation succeeded in %d ms (%d chars, title %r)",
        duration_ms,
        len(html),
        extract_title(html),
    )

    if slug is None:
        return GenerationResult(html=html, duration_ms=duration_ms)

    filename = slug_to_filename(slug)
    save_started_at = time.perf_counter()
    save_html(html, filename, settings.content_dir)
    logger.info(
        "Generated page saved as %s in %d ms",
        filename,
        int((time.perf_counter() - save_started_at) * 1000),
    )
    return GenerationResult(html=html, duration_ms=duration_ms, slug=slug, url=slug_url(slug))
