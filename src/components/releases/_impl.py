"""
Release redirect resolution.

Maps an inbound download path to a GitHub release artifact.

Key behaviors:
- Only the last four path segments are inspected: prefix, version, os, arch
- Prefix must equal "releases" exactly (case-sensitive, untrimmed)
- Malformed paths yield a 404 diagnostic page, never an exception
- Epoch is chosen from the first character of the version, not its numeric major
- Legacy epochs ship tarballs, current epochs ship bare binaries
"""

from __future__ import annotations

import html
import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)

PATH_DELIMITER = "/"
SEGMENT_COUNT = 4


# --- Configuration ---


@dataclass(frozen=True)
class ReleaseConfig:
    """Release host configuration from rules."""

    host: str = "github.com"
    org: str = "kubernetes-sigs"
    project: str = "kubebuilder"
    artifact_prefix: str = "kubebuilder"
    path_prefix: str = "releases"
    legacy_epochs: frozenset[str] = field(default_factory=lambda: frozenset({"1", "2"}))
    tarball_extension: str = ".tar.gz"


DEFAULT_CONFIG = ReleaseConfig()


# --- Models ---


class VersionEpoch(str, Enum):
    """Artifact naming epoch of a release version."""

    LEGACY_TARBALL = "legacy-tarball"
    CURRENT_BINARY = "current-binary"


@dataclass(frozen=True)
class RedirectRequest:
    """Inbound download request split into path segments."""

    raw_path: str
    path: tuple[str, ...]

    def _segment(self, offset: int) -> str | None:
        # offset counts from the start of the trailing four segments
        index = len(self.path) - SEGMENT_COUNT + offset
        if index < 0:
            return None
        return self.path[index]

    @property
    def prefix(self) -> str | None:
        return self._segment(0)

    @property
    def version(self) -> str | None:
        return self._segment(1)

    @property
    def os(self) -> str | None:
        return self._segment(2)

    @property
    def arch(self) -> str | None:
        return self._segment(3)

    def is_well_formed(self, config: ReleaseConfig = DEFAULT_CONFIG) -> bool:
        """Check prefix matches and version/os/arch are all non-empty."""
        return (
            self.prefix == config.path_prefix
            and bool(self.version)
            and bool(self.os)
            and bool(self.arch)
        )

    def diagnostics(self) -> dict[str, str | None]:
        """Debug record embedded in the not-found page."""
        return {
            "version": self.version,
            "os": self.os,
            "arch": self.arch,
            "prefix": self.prefix,
            "rawPath": self.raw_path,
        }


@dataclass(frozen=True)
class RedirectResponse:
    """HTTP response produced by the resolver."""

    status_code: int
    headers: dict[str, str]
    body: str

    @property
    def is_redirect(self) -> bool:
        return self.status_code == 302

    @property
    def location(self) -> str | None:
        return self.headers.get("location")

    def to_event_response(self) -> dict[str, object]:
        """Serialize to the hosting platform's response shape."""
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }


# --- Pure Functions ---


def split_path(raw_path: str) -> tuple[str, ...]:
    """Split a URL path on the literal delimiter."""
    return tuple(raw_path.split(PATH_DELIMITER))


def parse_request(path: str | Sequence[str]) -> RedirectRequest:
    """Build a request from a path string or pre-split segments."""
    if isinstance(path, str):
        return RedirectRequest(raw_path=path, path=split_path(path))

    segments = tuple(path)
    return RedirectRequest(raw_path=PATH_DELIMITER.join(segments), path=segments)


def classify_epoch(version: str, config: ReleaseConfig = DEFAULT_CONFIG) -> VersionEpoch:
    """
    Classify a version by its first character.

    Comparison is lexical: "10.0.0" starts with "1" and is legacy.
    """
    if version[:1] in config.legacy_epochs:
        return VersionEpoch.LEGACY_TARBALL
    return VersionEpoch.CURRENT_BINARY


def artifact_filename(
    version: str,
    os: str,
    arch: str,
    config: ReleaseConfig = DEFAULT_CONFIG,
) -> str:
    """Name of the release asset for a version/platform."""
    if classify_epoch(version, config) is VersionEpoch.LEGACY_TARBALL:
        return f"{config.artifact_prefix}_{version}_{os}_{arch}{config.tarball_extension}"
    return f"{config.artifact_prefix}_{os}_{arch}"


def download_url(
    version: str,
    filename: str,
    config: ReleaseConfig = DEFAULT_CONFIG,
) -> str:
    """Release download URL for an asset."""
    return (
        f"https://{config.host}/{config.org}/{config.project}"
        f"/releases/download/v{version}/{filename}"
    )


def render_not_found(request: RedirectRequest) -> str:
    """Render the 404 page with the request's debug record."""
    debug = json.dumps(request.diagnostics(), separators=(",", ":"))
    return (
        "<html>\n"
        "<head><title>Release not found</title></head>\n"
        "<body>\n"
        "<h1>Release not found</h1>\n"
        "<p>Expected a path of the form /releases/&lt;version&gt;/&lt;os&gt;/&lt;arch&gt;. "
        "If you followed a documented link, please file a bug and include the "
        "details below.</p>\n"
        "<details>\n"
        "<summary>Debug information</summary>\n"
        f"<pre><code>{html.escape(debug, quote=False)}</code></pre>\n"
        "</details>\n"
        "</body>\n"
        "</html>\n"
    )


def not_found_response(request: RedirectRequest) -> RedirectResponse:
    return RedirectResponse(
        status_code=404,
        headers={"content-type": "text/html"},
        body=render_not_found(request),
    )


def redirect_response(target: str) -> RedirectResponse:
    return RedirectResponse(
        status_code=302,
        headers={"location": target, "content-type": "text/plain"},
        body=f"Redirecting to {target}",
    )


def resolve(
    path: str | Sequence[str],
    config: ReleaseConfig = DEFAULT_CONFIG,
) -> RedirectResponse:
    """
    Resolve a download path to a release redirect.

    Args:
        path: Full request path, or its segments.
        config: Release host configuration.

    Returns:
        302 response pointing at the artifact, or 404 diagnostic page.
    """
    request = parse_request(path)

    if not request.is_well_formed(config):
        logger.info("Malformed release path: %s", request.diagnostics())
        return not_found_response(request)

    # Narrowed by is_well_formed
    version = request.version or ""
    filename = artifact_filename(version, request.os or "", request.arch or "", config)
    target = download_url(version, filename, config)

    logger.debug("Redirecting %s to %s", request.raw_path, target)
    return redirect_response(target)
