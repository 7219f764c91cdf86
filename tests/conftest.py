from typing import List, Optional, Sequence, Tuple

import pytest
from fastapi.testclient import TestClient

from genai_relay.api.routes import get_backend
from genai_relay.core.types import GenerativePart
from genai_relay.main import app


class FakeBackend:
    """Records every call and answers with a canned text or error"""

    model_name = "fake-model"

    def __init__(self, output: str = "generated text", error: Optional[Exception] = None):
        self.output = output
        self.error = error
        self.calls: List[Tuple[str, List[GenerativePart]]] = []

    async def generate(self, prompt: str, parts: Sequence[GenerativePart] = ()) -> str:
        self.calls.append((prompt, list(parts)))
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def client(fake_backend):
    app.dependency_overrides[get_backend] = lambda: fake_backend
    yield TestClient(app)
    app.dependency_overrides.clear()
