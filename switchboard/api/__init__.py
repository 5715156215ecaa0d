"""Preview HTTP API for the policy and prompt engine.

Usage:
    uvicorn switchboard.api.app:create_app --factory
"""
