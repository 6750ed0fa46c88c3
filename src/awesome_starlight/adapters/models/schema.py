"""Pydantic models for the chat-completions exchange."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ChatBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ChatMessage(ChatBaseModel):
    role: Literal["system", "user", "assistant"]
    content: str | None = None


class ChatCompletionRequest(ChatBaseModel):
    model: str
    messages: list[ChatMessage]
    temperature: float
    max_tokens: int


class ChatChoice(ChatBaseModel):
    index: int = 0
    message: ChatMessage


class ChatCompletionResponse(ChatBaseModel):
    choices: list[ChatChoice] = Field(default_factory=list[ChatChoice])

    @property
    def content(self) -> str | None:
        if not self.choices:
            return None
        return self.choices[0].message.content
