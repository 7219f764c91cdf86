from genai_relay.models.gemini import GeminiBackend, extract_first_text

__all__ = ["GeminiBackend", "extract_first_text"]
