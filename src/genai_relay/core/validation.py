"""Presence checks for the fields each generation route requires."""
from typing import Any, Optional, Sequence, Union

from fastapi import UploadFile
from starlette.datastructures import UploadFile as StarletteUploadFile

from genai_relay.core.error_handling import ClientInputError

PROMPT_REQUIRED = "Prompt is required"
IMAGE_REQUIRED = "Image file is required"
FILES_REQUIRED = "At least one file is required"
AUDIO_REQUIRED = "Audio file is required"


def _is_supplied(upload: Any) -> bool:
    # Browsers submit an empty, unnamed part for a file input left blank, which
    # may arrive as a plain string rather than an upload
    return isinstance(upload, StarletteUploadFile) and bool(upload.filename)


def require_prompt(prompt: Optional[str]) -> str:
    if not prompt:
        raise ClientInputError(PROMPT_REQUIRED)
    return prompt


def require_file(upload: Optional[UploadFile], message: str) -> UploadFile:
    if not _is_supplied(upload):
        raise ClientInputError(message)
    return upload


def require_files(uploads: Optional[Sequence[Union[UploadFile, str]]]) -> list[UploadFile]:
    supplied = [upload for upload in uploads or [] if _is_supplied(upload)]
    if not supplied:
        raise ClientInputError(FILES_REQUIRED)
    return supplied
