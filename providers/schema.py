from pydantic import BaseModel
from typing import List, Optional


class ErrorDetail(BaseModel):
    message: Optional[str] = None


class Message(BaseModel):
    content: str


class Choice(BaseModel):
    message: Message


class OpenAIResponse(BaseModel):
    choices: List[Choice] = []
    error: Optional[ErrorDetail] = None


class ContentBlock(BaseModel):
    text: str


class ClaudeResponse(BaseModel):
    content: List[ContentBlock] = []
    error: Optional[ErrorDetail] = None


class LlamaResponse(BaseModel):
    response: str
