"""Slug helpers: sanitising user input into safe filenames and public paths."""

import random
import re
import string
import time

MAX_SLUG_LENGTH = 64
GENERATED_PREFIX = "/generated"

# Runs of anything outside the allowed alphabet collapse into a single hyphen
_DISALLOWED_RE = re.compile(r"[^a-z0-9_-]+")

# Separators are not allowed at either end of a slug
_EDGE_CHARS = "-_"

_BASE36 = string.digits + string.ascii_lowercase


def sanitize_slug(value: str) -> str:
    """Map *value* to a lowercase slug drawn from ``[a-z0-9_-]``.

    Never fails; an input with no usable characters yields ``""`` and callers
    that need a non-empty slug must reject that themselves.
    """
    slug = _DISALLOWED_RE.sub("-", value.lower()).strip(_EDGE_CHARS)
    # Cutting at the limit can expose a separator, so strip again afterwards
    return slug[:MAX_SLUG_LENGTH].rstrip(_EDGE_CHARS)


def slug_to_filename(slug: str) -> str:
    """Return the on-disk filename for *slug*."""
    return slug if slug.endswith(".html") else f"{slug}.html"


def page_slug(value: str) -> str:
    """Sanitise a slug taken from a request path, accepting a trailing ``.html``."""
    if value.lower().endswith(".html"):
        value = value[: -len(".html")]
    return sanitize_slug(value)


def slug_url(slug: str) -> str:
    """Return the public path a saved page is served from."""
    return f"{GENERATED_PREFIX}/{slug}"


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_random_slug(prefix: str = "game") -> str:
    """Build ``<prefix>-<millis in base36>-<4 random chars>`` and sanitise it."""
    stamp = _to_base36(int(time.time() * 1000))
    suffix = "".join(random.choices(_BASE36, k=4))
    return sanitize_slug(f"{prefix}-{stamp}-{suffix}")
