"""Style guide API routes"""

from fastapi import APIRouter

from ..core.optimizer.lexicon import EXAMPLE_PROMPTS, PROMPT_TIPS, STYLE_RULES
from .schemas import (
    ExamplePromptResponse,
    GuideResponse,
    PromptTipResponse,
    StyleRuleResponse,
)

router = APIRouter(prefix="/api", tags=["guide"])


@router.get("/guide", response_model=GuideResponse)
async def get_guide() -> GuideResponse:
    """Return the style-guide rules, tips and before/after example prompts."""
    return GuideResponse(
        rules=[
            StyleRuleResponse(id=rule.id, title=rule.title, description=rule.description)
            for rule in STYLE_RULES
        ],
        tips=[PromptTipResponse(title=title, content=content) for title, content in PROMPT_TIPS],
        examples=[
            ExamplePromptResponse(before=before, after=after)
            for before, after in EXAMPLE_PROMPTS
        ],
    )
