import base64
import io

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from genai_relay.core.encoding import (
    DEFAULT_MIME_TYPE,
    file_to_generative_part,
    upload_to_generative_part,
    uploads_to_generative_parts,
)
from genai_relay.core.types import GenerativePart, MediaType

ALL_BYTES = bytes(range(256))


def make_upload(data: bytes, filename: str, content_type=None) -> UploadFile:
    headers = Headers({"content-type": content_type}) if content_type else Headers({})
    return UploadFile(file=io.BytesIO(data), filename=filename, headers=headers)


def test_inline_part_round_trips_bytes_through_base64():
    part = file_to_generative_part(ALL_BYTES, "application/octet-stream")

    assert part.inline_data.encoded == base64.b64encode(ALL_BYTES).decode("ascii")
    assert base64.b64decode(part.inline_data.encoded) == ALL_BYTES


def test_inline_part_json_uses_base64_and_camel_case():
    part = file_to_generative_part(ALL_BYTES, "image/png")

    payload = part.model_dump(mode="json", by_alias=True, exclude_none=True)

    assert payload == {
        "inlineData": {
            "data": base64.b64encode(ALL_BYTES).decode("ascii"),
            "mimeType": "image/png",
        }
    }
    restored = GenerativePart.model_validate_json(part.model_dump_json(by_alias=True))
    assert restored.inline_data.data == ALL_BYTES
    assert restored.inline_data.mime_type == "image/png"


@pytest.mark.asyncio
async def test_upload_uses_declared_content_type():
    upload = make_upload(b"RIFF....WAVE", "clip.wav", "audio/wav")

    part = await upload_to_generative_part(upload)

    assert part.inline_data.data == b"RIFF....WAVE"
    assert part.inline_data.mime_type == "audio/wav"
    assert part.media_type == MediaType.AUDIO


@pytest.mark.asyncio
async def test_upload_without_content_type_falls_back():
    upload = make_upload(b"\x00\x01", "blob.bin")

    part = await upload_to_generative_part(upload)

    assert part.inline_data.mime_type == DEFAULT_MIME_TYPE
    assert part.media_type == MediaType.FILE


@pytest.mark.asyncio
async def test_multiple_uploads_keep_order():
    uploads = [
        make_upload(b"one", "1.txt", "text/plain"),
        make_upload(b"two", "2.png", "image/png"),
        make_upload(b"three", "3.pdf", "application/pdf"),
    ]

    parts = await uploads_to_generative_parts(uploads)

    assert [part.inline_data.data for part in parts] == [b"one", b"two", b"three"]
    assert [part.media_type for part in parts] == [MediaType.TEXT, MediaType.IMAGE, MediaType.FILE]
