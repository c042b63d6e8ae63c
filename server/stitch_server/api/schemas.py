"""API request/response schemas"""

from typing import List
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str


class StyleRuleResponse(BaseModel):
    id: str
    title: str
    description: str


class PromptTipResponse(BaseModel):
    title: str
    content: str


class ExamplePromptResponse(BaseModel):
    before: str
    after: str


class GuideResponse(BaseModel):
    rules: List[StyleRuleResponse]
    tips: List[PromptTipResponse]
    examples: List[ExamplePromptResponse]
