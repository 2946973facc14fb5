from pydantic import BaseModel, ConfigDict, Field


class EncodedImageRequest(BaseModel):
    image: str = Field(..., min_length=1, description="Image as a data: URL (data:<mime>;base64,<data>)")
    mime_type: str | None = Field(None, description="Media type; defaults to the one embedded in the data: URL")
    prompt: str = Field("", max_length=200, description="Optional career to visualise")


class UploadedImage(BaseModel):
    """An uploaded file paired with its data: URL form."""

    model_config = ConfigDict(frozen=True)

    filename: str
    mime_type: str
    data_url: str
