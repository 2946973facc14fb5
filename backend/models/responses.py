from pydantic import BaseModel


class GenerationResult(BaseModel):
    image: str
    title: str
    description: str


class ParsedAnalysis(BaseModel):
    title: str
    description: str


class ErrorResponse(BaseModel):
    error: str
    kind: str
