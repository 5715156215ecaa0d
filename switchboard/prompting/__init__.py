"""System prompt synthesis for vertical-aware agents."""

from switchboard.prompting.composer import (
    generate_complete_prompt,
    get_all_channel_prompts,
    get_channel_differences,
)
from switchboard.prompting.context_resolver import (
    build_additional_instructions,
    compute_config_version,
    create_inline_settings,
    generate_prompt_from_settings,
    log_config_resolution,
    resolve_prompt_context,
)
from switchboard.prompting.models import PromptContext
from switchboard.prompting.sections import (
    generate_brain_rules_prompt,
    generate_channel_behavior_prompt,
    generate_feature_flags_object,
    generate_feature_flags_prompt,
    generate_workflow_permissions_prompt,
)

__all__ = [
    "PromptContext",
    # Composition
    "generate_complete_prompt",
    "get_all_channel_prompts",
    "get_channel_differences",
    # Sections
    "generate_brain_rules_prompt",
    "generate_channel_behavior_prompt",
    "generate_feature_flags_object",
    "generate_feature_flags_prompt",
    "generate_workflow_permissions_prompt",
    # Settings resolution
    "build_additional_instructions",
    "compute_config_version",
    "create_inline_settings",
    "generate_prompt_from_settings",
    "log_config_resolution",
    "resolve_prompt_context",
]
