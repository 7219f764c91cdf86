from typing import List, Optional, Union

from fastapi import APIRouter, Body, Depends, File, Form, Request, UploadFile

from genai_relay.api.schemas.requests import GenerateTextRequest
from genai_relay.api.schemas.responses import ErrorResponse, GenerateResponse, HealthResponse
from genai_relay.core import logging
from genai_relay.core.protocols import ModelBackend
from genai_relay.core.validation import (
    AUDIO_REQUIRED,
    IMAGE_REQUIRED,
    require_file,
    require_files,
    require_prompt,
)
from genai_relay.services.generation import GenerationService

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing prompt or attachment"},
    500: {"model": ErrorResponse, "description": "Provider call failed"},
}

main_router = APIRouter(responses=ERROR_RESPONSES)

health_router = APIRouter()


def get_backend(request: Request) -> ModelBackend:
    return request.app.state.backend


def get_generation_service(backend: ModelBackend = Depends(get_backend)) -> GenerationService:
    return GenerationService(backend)


@health_router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(status="healthy")


@main_router.post("/generate-text", response_model=GenerateResponse)
async def generate_text(
    body: Optional[GenerateTextRequest] = Body(None),
    service: GenerationService = Depends(get_generation_service)
):
    prompt = require_prompt(body.prompt if body else None)
    logging.info("generate-text: processing request")

    output = await service.generate(prompt, failure_message="Failed to generate text")
    return GenerateResponse(output=output)


@main_router.post("/generate-from-image", response_model=GenerateResponse)
async def generate_from_image(
    prompt: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    service: GenerationService = Depends(get_generation_service)
):
    prompt = require_prompt(prompt)
    image = require_file(image, IMAGE_REQUIRED)
    logging.info(f"generate-from-image: processing {image.filename} ({image.content_type})")

    output = await service.generate_from_uploads(prompt, [image], failure_message="Failed to generate from image")
    return GenerateResponse(output=output)


@main_router.post("/generate-from-files", response_model=GenerateResponse)
async def generate_from_files(
    prompt: Optional[str] = Form(None),
    files: Optional[List[Union[UploadFile, str]]] = File(None),
    service: GenerationService = Depends(get_generation_service)
):
    prompt = require_prompt(prompt)
    files = require_files(files)
    logging.info(f"generate-from-files: processing {len(files)} file(s)")

    output = await service.generate_from_uploads(prompt, files, failure_message="Failed to generate from files")
    return GenerateResponse(output=output)


@main_router.post("/generate-from-audio", response_model=GenerateResponse)
async def generate_from_audio(
    prompt: Optional[str] = Form(None),
    audio: Optional[UploadFile] = File(None),
    service: GenerationService = Depends(get_generation_service)
):
    prompt = require_prompt(prompt)
    audio = require_file(audio, AUDIO_REQUIRED)
    logging.info(f"generate-from-audio: processing {audio.filename} ({audio.content_type})")

    output = await service.generate_from_uploads(prompt, [audio], failure_message="Failed to generate from audio")
    return GenerateResponse(output=output)
