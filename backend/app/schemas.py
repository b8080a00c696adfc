from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class CodeRequest(BaseModel):
    """Payload for review / fix / complexity / document."""
    code: Optional[str] = None          # checked by the handler so we can answer 400


class ConvertRequest(CodeRequest):
    model_config = ConfigDict(populate_by_name=True)

    source_language: Optional[str] = Field(default=None, alias="sourceLanguage")
    target_language: Optional[str] = Field(default=None, alias="targetLanguage")


class ReviewResponse(BaseModel):
    review: str


class FixResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    fixed_code: str = Field(alias="fixedCode")


class ComplexityResponse(BaseModel):
    analysis: str


class DocumentResponse(BaseModel):
    documentation: str


class ConvertResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    converted_code: str = Field(alias="convertedCode")


class ErrorResponse(BaseModel):
    """Body of every 400/500 reply."""
    error: str
