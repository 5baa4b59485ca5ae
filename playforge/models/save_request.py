from pydantic import BaseModel, Field


class SaveRequest(BaseModel):
    html: str = Field(min_length=1)
    slug: str = Field(min_length=1, examples=["Login Page"])
