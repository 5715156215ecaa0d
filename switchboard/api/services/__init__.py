"""API services wrapping the resolution pipeline."""

from switchboard.api.services.previews import PreviewService

__all__ = ["PreviewService"]
