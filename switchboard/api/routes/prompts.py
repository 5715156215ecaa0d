"""System prompt preview endpoint."""

from fastapi import APIRouter

from switchboard.api.dependencies import PreviewServiceDep
from switchboard.api.models.requests import PromptRequest
from switchboard.api.models.responses import PromptResponse

router = APIRouter(prefix="/prompts")


@router.post("", response_model=PromptResponse)
async def preview_prompt(request: PromptRequest, service: PreviewServiceDep) -> PromptResponse:
    """Generate the system prompt for inline settings on a channel."""
    return service.build_prompt(
        request.settings,
        request.channel,
        include_enforcement=request.include_enforcement,
    )
