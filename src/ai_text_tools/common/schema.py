"""Pydantic models for the chat-completion wire format and the HTTP API."""
from __future__ import annotations
from typing import Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_TONE = "neutral"

class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str

class ChatRequest(BaseModel):
    model: str
    messages: list[ChatMessage]

class ReplyMessage(BaseModel):
    """Message as returned upstream; a null content (e.g. a refusal) reads as empty."""
    role: str = "assistant"
    content: str = ""

    @field_validator("content", mode="before")
    @classmethod
    def _null_content(cls, v: object) -> object:
        return "" if v is None else v

class ChatChoice(BaseModel):
    message: ReplyMessage = Field(default_factory=ReplyMessage)

class ChatResponse(BaseModel):
    """Subset of an OpenAI-style completion payload; other fields are ignored."""
    choices: list[ChatChoice]


class TextRequest(BaseModel):
    text: str = Field(..., min_length=1, description="Input text to process")

class RewriteRequest(TextRequest):
    tone: str | None = Field(None, description="Target tone, defaults to neutral")

    @property
    def effective_tone(self) -> str:
        return self.tone or DEFAULT_TONE


class SummarizeResponse(BaseModel):
    summary: str

class KeywordsResponse(BaseModel):
    keywords: list[str]

class RewriteResponse(BaseModel):
    text: str

class QuestionsResponse(BaseModel):
    questions: list[str]

class TitlesResponse(BaseModel):
    titles: list[str]

class ExpandResponse(BaseModel):
    text: str
