from genai_relay.api.schemas.requests import GenerateTextRequest
from genai_relay.api.schemas.responses import ErrorResponse, GenerateResponse, HealthResponse

__all__ = ["GenerateTextRequest", "ErrorResponse", "GenerateResponse", "HealthResponse"]
