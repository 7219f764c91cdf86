from typing import Optional

import pydantic


class HealthResponse(pydantic.BaseModel):
    status: str


class GenerateResponse(pydantic.BaseModel):
    """Text of the first candidate the model returned"""
    output: str


class ErrorResponse(pydantic.BaseModel):
    error: str
    code: Optional[int] = None
