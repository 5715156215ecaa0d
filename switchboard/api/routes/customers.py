"""Per-customer policy and prompt endpoints.

Settings are looked up in the customer settings store, then run through
the same pipeline as the inline previews.
"""

from fastapi import APIRouter, Query

from switchboard.api.dependencies import CustomerSettingsStoreDep, PreviewServiceDep
from switchboard.api.exceptions import CustomerNotFoundError, InvalidRequestError
from switchboard.api.models.responses import PromptResponse
from switchboard.customer_data import CustomerSettingsStore
from switchboard.observability.logging import get_logger
from switchboard.policy import ActionPolicy
from switchboard.verticals.models import Channel, CustomerSettings

logger = get_logger(__name__)

router = APIRouter(prefix="/customers/{customer_id}")


async def _load_settings(store: CustomerSettingsStore, customer_id: str) -> CustomerSettings:
    """Fetch settings, rejecting blank ids and unknown customers."""
    if not customer_id.strip():
        raise InvalidRequestError("customer_id must not be blank")
    settings = await store.get(customer_id)
    if settings is None:
        raise CustomerNotFoundError(customer_id)
    return settings


@router.get("/policy", response_model=ActionPolicy)
async def get_customer_policy(
    customer_id: str,
    store: CustomerSettingsStoreDep,
    service: PreviewServiceDep,
    channel: Channel = Query(default=Channel.PHONE, description="Session channel"),
) -> ActionPolicy:
    """Resolve the action policy for a stored customer."""
    logger.debug("customer_policy_request", customer_id=customer_id, channel=channel.value)

    settings = await _load_settings(store, customer_id)
    return service.build_policy(settings, channel, label="customer_policy")


@router.get("/prompt", response_model=PromptResponse)
async def get_customer_prompt(
    customer_id: str,
    store: CustomerSettingsStoreDep,
    service: PreviewServiceDep,
    channel: Channel = Query(default=Channel.PHONE, description="Session channel"),
    include_enforcement: bool | None = Query(default=None),
) -> PromptResponse:
    """Generate the system prompt for a stored customer."""
    logger.debug("customer_prompt_request", customer_id=customer_id, channel=channel.value)

    settings = await _load_settings(store, customer_id)
    return service.build_prompt(settings, channel, include_enforcement=include_enforcement)
