"""
Releases component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class ReleaseRulesPort(Protocol):
    """Port for release host configuration."""

    def get_host(self) -> str:
        """Get the release host name."""
        ...

    def get_org(self) -> str:
        """Get the organization owning the project."""
        ...

    def get_project(self) -> str:
        """Get the project name."""
        ...

    def get_artifact_prefix(self) -> str:
        """Get the artifact filename prefix."""
        ...

    def get_path_prefix(self) -> str:
        """Get the literal path segment that introduces a release request."""
        ...

    def get_legacy_epochs(self) -> list[str]:
        """Get version first characters that select tarball artifacts."""
        ...

    def get_tarball_extension(self) -> str:
        """Get the extension of legacy tarball artifacts."""
        ...
