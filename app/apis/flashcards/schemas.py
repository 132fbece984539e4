from __future__ import annotations

from pydantic import BaseModel, Field

from app.modules.flashcards.models.flashcards import Flashcard


class GenerateRequest(BaseModel):
    topic: str = Field(..., description="Topic, or some terms and definitions")


class ApiKeyRequest(BaseModel):
    api_key: str = Field(..., description="Gemini API key for this browser session")


class SessionStateResponse(BaseModel):
    has_credential: bool
    rejected: bool = False
    examples: list[Flashcard] = Field(default_factory=list)


class ErrorDetail(BaseModel):
    code: str
    message: str
