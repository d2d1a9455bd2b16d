"""
Releases component - versioned download redirects.
"""

from ._impl import (
    DEFAULT_CONFIG,
    RedirectRequest,
    RedirectResponse,
    ReleaseConfig,
    VersionEpoch,
    artifact_filename,
    classify_epoch,
    download_url,
    parse_request,
    render_not_found,
    resolve,
    split_path,
)
from .component import run, run_describe, run_resolve
from .models import (
    ArtifactOutput,
    DescribeArtifactInput,
    ResolveReleaseInput,
    ResolveReleaseOutput,
)
from .ports import ReleaseRulesPort

__all__ = [
    # Entry points
    "run",
    "run_describe",
    "run_resolve",
    # Input models
    "DescribeArtifactInput",
    "ResolveReleaseInput",
    # Output models
    "ArtifactOutput",
    "RedirectResponse",
    "ResolveReleaseOutput",
    # Ports
    "ReleaseRulesPort",
    # _impl re-exports
    "DEFAULT_CONFIG",
    "RedirectRequest",
    "ReleaseConfig",
    "VersionEpoch",
    "artifact_filename",
    "classify_epoch",
    "download_url",
    "parse_request",
    "render_not_found",
    "resolve",
    "split_path",
]
