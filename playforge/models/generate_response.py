from typing import Optional

from pydantic import BaseModel


class GenerateResponse(BaseModel):
    """Either ``url`` + ``slug`` (page was saved) or ``html`` (preview only)."""

    url: Optional[str] = None
    slug: Optional[str] = None
    html: Optional[str] = None
