from typing import Protocol, Sequence, runtime_checkable

from genai_relay.core.types import GenerativePart


@runtime_checkable
class ModelBackend(Protocol):
    """Protocol for model interaction implementations"""
    model_name: str

    async def generate(self, prompt: str, parts: Sequence[GenerativePart] = ()) -> str:
        ...
