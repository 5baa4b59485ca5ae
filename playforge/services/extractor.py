import re
from typing import Optional

from bs4 import BeautifulSoup

# First fenced block explicitly tagged as HTML, e.g. ```html ... ```
_HTML_FENCE_RE = re.compile(r"```html\s*([\s\S]*?)\s*```", re.IGNORECASE)

# First fenced block of any kind
_ANY_FENCE_RE = re.compile(r"```\s*([\s\S]*?)\s*```")


def extract_html(text: str) -> str:
    """Return the HTML payload contained in a model reply.

    Looks for the first ```` ```html ```` block, then for the first fenced
    block with any tag, and finally falls back to *text* unchanged.  No
    attempt is made to check that the result is well-formed HTML.
    """
    match = _HTML_FENCE_RE.search(text)
    if match:
        return match.group(1)
    match = _ANY_FENCE_RE.search(text)
    if match:
        return match.group(1)
    return text


def extract_title(html: str) -> Optional[str]:
    """Return the stripped ``<title>`` text of *html*, or *None* if absent or blank."""
    soup = BeautifulSoup(html, "lxml")
    if soup.title is None:
        return None
    title = soup.title.get_text(strip=True)
    return title or None
