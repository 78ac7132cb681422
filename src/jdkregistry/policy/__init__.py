"""Remote build-cache policy checks."""

from __future__ import annotations

from jdkregistry.policy.models import (
    BuildCacheConfiguration,
    ExpectedInstallations,
    RemoteBuildCache,
)
from jdkregistry.policy.validator import CachePolicyValidator, format_problems

__all__ = [
    "BuildCacheConfiguration",
    "CachePolicyValidator",
    "ExpectedInstallations",
    "RemoteBuildCache",
    "format_problems",
]
