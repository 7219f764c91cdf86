from typing import Optional

import pydantic


class GenerateTextRequest(pydantic.BaseModel):
    # Presence is checked by the route so a missing prompt gets the fixed 400 message
    prompt: Optional[str] = None
