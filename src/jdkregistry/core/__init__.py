"""Core value types shared across jdkregistry."""

from __future__ import annotations

from jdkregistry.core.version import JavaVersion, VersionLike

__all__ = [
    "JavaVersion",
    "VersionLike",
]
