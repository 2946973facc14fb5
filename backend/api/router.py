from urllib.parse import quote

from fastapi import APIRouter, Depends, Form, Response

from api.dependencies import get_generator, get_uploaded_image
from config import settings
from models.requests import EncodedImageRequest, UploadedImage
from models.responses import ErrorResponse, GenerationResult
from services import image_files
from services.career_vision import CareerVisionGenerator
from services.errors import InvalidImage

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
        "model": settings.gemini_image_model,
    }


@router.post("/generate", response_model=GenerationResult, responses=_ERROR_RESPONSES)
async def generate(
    uploaded: UploadedImage = Depends(get_uploaded_image),
    prompt: str = Form("", max_length=200),
    generator: CareerVisionGenerator = Depends(get_generator),
):
    return await generator.generate(uploaded.data_url, uploaded.mime_type, prompt)


@router.post("/generate/encoded", response_model=GenerationResult, responses=_ERROR_RESPONSES)
async def generate_encoded(
    body: EncodedImageRequest,
    generator: CareerVisionGenerator = Depends(get_generator),
):
    mime_type = body.mime_type or image_files.data_url_mime_type(body.image)
    if not mime_type:
        raise InvalidImage("mime_type is required when the image is not a data: URL")
    return await generator.generate(body.image, mime_type, body.prompt)


@router.post("/download", responses={400: {"model": ErrorResponse}})
async def download(result: GenerationResult):
    mime_type, content = image_files.decode_data_url(result.image)
    filename = image_files.download_filename(result.title)
    return Response(
        content=content,
        media_type=mime_type,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )
