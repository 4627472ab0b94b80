"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class CalculateRequest(BaseModel):
    """Request for calculating a fence from a full configuration."""

    config: dict[str, Any] = Field(..., description="Full fence configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Fence configuration JSON")
