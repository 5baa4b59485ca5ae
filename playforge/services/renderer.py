"""HTML documents returned by the page server."""

from html import escape

from playforge.services.extractor import extract_title

# Scripts, forms and pointer lock stay enabled; same-origin access, popups and
# top-level navigation are withheld.
SANDBOX_FLAGS = "allow-scripts allow-forms allow-pointer-lock"

_FRAME_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{title}</title>
  <style>
    html, body {{ margin: 0; height: 100%; background: #111; }}
    iframe {{ display: block; width: 100%; height: 100%; border: 0; }}
  </style>
</head>
<body>
  <iframe title="{title}" sandbox="{sandbox}" srcdoc="{srcdoc}"></iframe>
</body>
</html>
"""

_NOT_FOUND_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Not found</title>
  <style>body {{ font-family: system-ui, sans-serif; padding: 1.5rem; }}</style>
</head>
<body>
  <h1>Not found</h1>
  <p>No generated page found for slug: {slug}</p>
</body>
</html>
"""


def render_framed(html: str, slug: str) -> str:
    """Wrap a stored page in a sandboxed, full-viewport iframe."""
    title = extract_title(html) or slug
    return _FRAME_TEMPLATE.format(
        title=escape(title),
        sandbox=SANDBOX_FLAGS,
        srcdoc=escape(html, quote=True),
    )


def render_not_found(slug: str) -> str:
    return _NOT_FOUND_TEMPLATE.format(slug=escape(slug))
