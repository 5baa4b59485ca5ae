from typing import Annotated, Any, Dict, List, Literal, Union

from pydantic import BaseModel, Field


class TextPart(BaseModel):
    type: Literal["input_text"] = "input_text"
    text: str


class ImagePart(BaseModel):
    type: Literal["input_image"] = "input_image"
    image_url: str
    """Fully-qualified URL or ``data:`` URI of the image."""
    detail: Literal["auto", "low", "high"] = "auto"


ContentPart = Annotated[Union[TextPart, ImagePart], Field(discriminator="type")]


class Message(BaseModel):
    role: Literal["system", "user"]
    content: List[ContentPart]


class Conversation(BaseModel):
    messages: List[Message] = Field(default_factory=list)

    def to_input(self) -> List[Dict[str, Any]]:
        """Return the payload accepted by the Responses API ``input`` argument."""
        return [message.model_dump() for message in self.messages]
