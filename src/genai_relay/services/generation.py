from typing import Sequence

from fastapi import UploadFile

from genai_relay.core import logging
from genai_relay.core.encoding import uploads_to_generative_parts
from genai_relay.core.error_handling import ProviderError
from genai_relay.core.protocols import ModelBackend
from genai_relay.core.types import GenerativePart


class GenerationService:
    def __init__(self, backend: ModelBackend):
        self.backend = backend

    async def generate(
        self,
        prompt: str,
        parts: Sequence[GenerativePart] = (),
        failure_message: str = "Failed to generate text"
    ) -> str:
        """Run one model call; any provider failure becomes a ProviderError.

        The original exception is logged here and never reaches the client.
        """
        media_types = ", ".join(part.media_type.value for part in parts) or "none"
        logging.info(
            f"Generating with {self.backend.model_name}: "
            f"{len(parts)} attachment(s) ({media_types})"
        )

        try:
            return await self.backend.generate(prompt, parts)
        except Exception as e:
            logging.error(f"{failure_message}: {type(e).__name__}: {str(e)}", exc_info=True)
            raise ProviderError(failure_message) from e

    async def generate_from_uploads(
        self,
        prompt: str,
        uploads: Sequence[UploadFile],
        failure_message: str
    ) -> str:
        """Encode the uploads as inline parts, then generate.

        A failed upload read is reported with the same fixed message as a
        failed model call.
        """
        try:
            parts = await uploads_to_generative_parts(uploads)
        except Exception as e:
            logging.error(f"{failure_message}: could not read upload: {type(e).__name__}: {str(e)}", exc_info=True)
            raise ProviderError(failure_message) from e

        return await self.generate(prompt, parts, failure_message=failure_message)
