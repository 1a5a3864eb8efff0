"""Shared base for GitHub API models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class GitHubModel(BaseModel):
    """Base model for GitHub API payloads.

    GitHub sends `null` for many absent values; those fall back to field defaults so
    plain string fields read as `""` rather than failing validation.
    """

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _null_to_default(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
