import base64
from enum import Enum
from typing import Optional

import pydantic


class MediaType(Enum):
    TEXT = "text"
    IMAGE = "image"
    AUDIO = "audio"
    FILE = "file"


class InlineData(pydantic.BaseModel):
    """Attachment bytes embedded in the request, tagged with their declared mime type.

    ``data`` holds raw bytes in Python and travels as standard base64 text
    whenever the model is serialized to or parsed from JSON.
    """
    data: bytes
    mime_type: str = pydantic.Field(alias="mimeType")

    model_config = pydantic.ConfigDict(populate_by_name=True)

    @pydantic.field_validator("data", mode="before")
    @classmethod
    def decode_base64(cls, value):
        if isinstance(value, str):
            return base64.b64decode(value, validate=True)
        return value

    @pydantic.field_serializer("data", when_used="json")
    def encode_base64(self, value: bytes) -> str:
        return base64.b64encode(value).decode("ascii")

    @property
    def encoded(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    @property
    def media_type(self) -> MediaType:
        major = self.mime_type.split("/", 1)[0].lower()
        if major == "image":
            return MediaType.IMAGE
        if major == "audio":
            return MediaType.AUDIO
        if major == "text":
            return MediaType.TEXT
        return MediaType.FILE


class GenerativePart(pydantic.BaseModel):
    """One piece of model input: either plain text or an inline attachment"""
    text: Optional[str] = None
    inline_data: Optional[InlineData] = pydantic.Field(default=None, alias="inlineData")

    model_config = pydantic.ConfigDict(populate_by_name=True)

    @pydantic.model_validator(mode="after")
    def check_single_payload(self) -> "GenerativePart":
        if (self.text is None) == (self.inline_data is None):
            raise ValueError("A part must carry exactly one of 'text' or 'inlineData'")
        return self

    @property
    def media_type(self) -> MediaType:
        if self.inline_data is not None:
            return self.inline_data.media_type
        return MediaType.TEXT
