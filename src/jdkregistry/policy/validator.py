"""Validation of the environment against the remote build-cache policy.

A remote build cache only produces hits when every build compiles with the
same JDKs. The validator checks that the expected installations are in
place. Problems are fatal when the remote cache is enabled, and are logged
as a warning otherwise.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from jdkregistry.exceptions import CachePolicyViolation
from jdkregistry.policy.models import BuildCacheConfiguration, ExpectedInstallations

if TYPE_CHECKING:
    from jdkregistry.installation.registry import JavaInstallationRegistry

logger = logging.getLogger(__name__)

MESSAGE_HEADER = (
    "In order to have cache hits from the remote build cache, "
    "your environment needs to be configured accordingly!"
)


class CachePolicyValidator:
    """Checks a registry against the installations a cache policy expects.

    Args:
        expected: Expected installations; defaults to Oracle JDK 7 for
            compilation and Oracle JDK 8 for running the build.
    """

    def __init__(self, expected: ExpectedInstallations | None = None) -> None:
        self.expected = expected if expected is not None else ExpectedInstallations()

    def find_problems(self, registry: JavaInstallationRegistry) -> list[str]:
        """Return every policy problem, in a stable order."""
        prop = self.expected.compilation_property
        compilation = registry.compilation_installation
        compilation_name = compilation.display_name if compilation is not None else None
        current_name = registry.current.display_name

        checks = [
            (
                not registry.compilation_home_set,
                f"'{prop}' project or system property not set.",
            ),
            (
                registry.compilation_home_set and compilation_name != self.expected.compilation,
                f"'{prop}' needs to point to {self.expected.compilation}, "
                f"but points to {compilation_name}.",
            ),
            (
                current_name != self.expected.runtime,
                f"The build needs to run with {self.expected.runtime}, "
                f"but has been started with {current_name}.",
            ),
        ]
        return [message for failed, message in checks if failed]

    def validate(
        self,
        registry: JavaInstallationRegistry,
        cache_config: BuildCacheConfiguration,
    ) -> str | None:
        """Validate *registry* against *cache_config*.

        Returns:
            The warning message that was logged, or None when the
            environment matches the policy.

        Raises:
            CachePolicyViolation: If problems exist and the remote build
                cache is enabled.
        """
        problems = self.find_problems(registry)
        if not problems:
            return None

        message = format_problems(problems)
        if cache_config.remote_enabled:
            raise CachePolicyViolation(message, problems)
        logger.warning(message)
        return message


def format_problems(problems: list[str]) -> str:
    """Compose the multi-line policy report."""
    lines = [MESSAGE_HEADER, "Problems found:"]
    lines.extend(f"    - {problem}" for problem in problems)
    return "\n".join(lines)
