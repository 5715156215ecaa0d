"""Action policy preview endpoint."""

from fastapi import APIRouter

from switchboard.api.dependencies import PreviewServiceDep
from switchboard.api.models.requests import PolicyRequest
from switchboard.policy import ActionPolicy

router = APIRouter(prefix="/policies")


@router.post("", response_model=ActionPolicy)
async def preview_policy(request: PolicyRequest, service: PreviewServiceDep) -> ActionPolicy:
    """Resolve the action policy for inline settings on a channel."""
    return service.build_policy(request.settings, request.channel)
