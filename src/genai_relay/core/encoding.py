import asyncio
from typing import Sequence

from fastapi import UploadFile

from genai_relay.core.types import GenerativePart, InlineData

DEFAULT_MIME_TYPE = "application/octet-stream"


def file_to_generative_part(data: bytes, mime_type: str) -> GenerativePart:
    """Wrap raw attachment bytes as an inline part tagged with ``mime_type``."""
    return GenerativePart(inline_data=InlineData(data=data, mime_type=mime_type))


async def upload_to_generative_part(upload: UploadFile) -> GenerativePart:
    """Read an uploaded file fully and encode it with its declared content type.

    No sniffing is done: a client that declares no content type gets
    ``application/octet-stream``.
    """
    data = await upload.read()
    return file_to_generative_part(data, upload.content_type or DEFAULT_MIME_TYPE)


async def uploads_to_generative_parts(uploads: Sequence[UploadFile]) -> list[GenerativePart]:
    return list(await asyncio.gather(*(upload_to_generative_part(upload) for upload in uploads)))
