"""
Releases component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ._impl import RedirectResponse, VersionEpoch

# --- Input Models ---


@dataclass(frozen=True)
class ResolveReleaseInput:
    """Input for resolving a download path."""

    path: str


@dataclass(frozen=True)
class DescribeArtifactInput:
    """Input for describing a release artifact without a request path."""

    version: str
    os: str
    arch: str


# --- Output Models ---


@dataclass(frozen=True)
class ResolveReleaseOutput:
    """Output for resolve operation."""

    response: RedirectResponse
    target: str | None = None
    diagnostics: dict[str, str | None] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.response.is_redirect


@dataclass(frozen=True)
class ArtifactOutput:
    """Output describing a release artifact."""

    epoch: VersionEpoch
    filename: str
    url: str
