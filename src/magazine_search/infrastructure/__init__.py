"""Infrastructure layer: deployment environment and settings."""

from __future__ import annotations

from .environment import DeploymentEnvironment, Settings

__all__ = ["DeploymentEnvironment", "Settings"]
