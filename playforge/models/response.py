from pydantic import BaseModel


class SaveResponse(BaseModel):
    url: str
    slug: str


class ErrorResponse(BaseModel):
    error: str
    """Human-readable message; never carries stack traces or filesystem paths."""
