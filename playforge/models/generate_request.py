from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prompt: str = Field(min_length=1, description="Description of the game to generate.")
    image_data_url: Optional[str] = Field(
        default=None,
        alias="imageDataUrl",
        description="Reference image as a data URI (e.g. ``data:image/png;base64,...``).",
    )
    image_local_path: Optional[str] = Field(
        default=None,
        alias="imageLocalPath",
        description="Free-text path the model is asked to quote verbatim in its output.",
    )
    slug: Optional[str] = Field(
        default=None,
        description="When set, the generated page is saved and served at /generated/<slug>.",
        examples=["space-invaders"],
    )
