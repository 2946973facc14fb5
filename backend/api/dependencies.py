"""Shared dependencies for API routes."""

from fastapi import File, UploadFile

from models.requests import UploadedImage
from services import image_files
from services.career_vision import CareerVisionGenerator
from services.gemini_client import get_client


async def get_uploaded_image(image_file: UploadFile = File(...)) -> UploadedImage:
    content = await image_file.read()
    return image_files.load_upload(image_file.filename, image_file.content_type, content)


def get_generator() -> CareerVisionGenerator:
    return CareerVisionGenerator(get_client())
