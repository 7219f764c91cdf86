from typing import Any, Optional, Sequence

from google import genai
from google.genai import types

from genai_relay.core import logging
from genai_relay.core.config import Settings
from genai_relay.core.types import GenerativePart


def to_gemini_part(part: GenerativePart) -> types.Part:
    if part.inline_data is not None:
        return types.Part.from_bytes(
            data=part.inline_data.data,
            mime_type=part.inline_data.mime_type
        )
    return types.Part.from_text(text=part.text)


def extract_first_text(response: Any) -> str:
    """Return the text of the first part of the first candidate.

    Raises ValueError when the provider returned no usable candidate, e.g.
    a prompt blocked by safety filters.
    """
    candidates = getattr(response, "candidates", None)
    if not candidates:
        raise ValueError("Model response contained no candidates")

    content = candidates[0].content
    parts = getattr(content, "parts", None) if content is not None else None
    if not parts or parts[0].text is None:
        finish_reason = getattr(candidates[0], "finish_reason", None)
        raise ValueError(f"First candidate carried no text (finish_reason={finish_reason})")

    return parts[0].text


class GeminiBackend:
    """Sends a prompt and its inline parts to a Gemini model in a single call."""

    def __init__(self, client: genai.Client, model_name: str):
        self.client = client
        self.model_name = model_name

    @classmethod
    def from_settings(cls, settings: Settings, client: Optional[genai.Client] = None) -> "GeminiBackend":
        if client is None:
            if not settings.gemini_api_key:
                raise ValueError("API key not found for provider: set GEMINI_API_KEY")
            client = genai.Client(api_key=settings.gemini_api_key)
        logging.info(f"Initialized Gemini backend with model: {settings.gemini_model}")
        return cls(client, settings.gemini_model)

    def build_contents(self, prompt: str, parts: Sequence[GenerativePart] = ()) -> list:
        return [prompt, *(to_gemini_part(part) for part in parts)]

    async def generate(self, prompt: str, parts: Sequence[GenerativePart] = ()) -> str:
        response = await self.client.aio.models.generate_content(
            model=self.model_name,
            contents=self.build_contents(prompt, parts)
        )
        return extract_first_text(response)
