import os

import uvicorn

from genai_relay.core.config import get_settings


def main():
    """Entry point for the genai-relay console script."""
    settings = get_settings()
    # Allows running with hot-reloading for development via an environment variable
    reload = os.getenv("GENAI_RELAY_RELOAD", "false").lower() in ("true", "1", "t")
    uvicorn.run("genai_relay.main:app", host=settings.host, port=settings.port, reload=reload)


if __name__ == "__main__":
    main()
