"""
Releases component - versioned download redirects.

Resolves /releases/<version>/<os>/<arch> paths to release artifacts.

Invariants:
- I1: Only the last four path segments are considered
- I2: Prefix must match exactly; version, os and arch must be non-empty
- I3: Every input yields a 302 or 404 response, nothing is raised
- I4: Epoch is chosen by the first character of the version
"""

from __future__ import annotations

from ._impl import (
    DEFAULT_CONFIG,
    ReleaseConfig,
    artifact_filename,
    classify_epoch,
    download_url,
    parse_request,
    resolve,
)
from .models import (
    ArtifactOutput,
    DescribeArtifactInput,
    ResolveReleaseInput,
    ResolveReleaseOutput,
)
from .ports import ReleaseRulesPort


def _build_config(rules: ReleaseRulesPort | None) -> ReleaseConfig:
    """Build release config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    return ReleaseConfig(
        host=rules.get_host(),
        org=rules.get_org(),
        project=rules.get_project(),
        artifact_prefix=rules.get_artifact_prefix(),
        path_prefix=rules.get_path_prefix(),
        legacy_epochs=frozenset(rules.get_legacy_epochs()),
        tarball_extension=rules.get_tarball_extension(),
    )


# --- Component Entry Points ---


def run_resolve(
    inp: ResolveReleaseInput,
    *,
    rules: ReleaseRulesPort | None = None,
) -> ResolveReleaseOutput:
    """
    Resolve a download path to a redirect.

    Args:
        inp: Input containing the request path.
        rules: Optional rules port for configuration.

    Returns:
        ResolveReleaseOutput with the response, plus diagnostics on 404.
    """
    config = _build_config(rules)
    response = resolve(inp.path, config)

    if response.is_redirect:
        return ResolveReleaseOutput(response=response, target=response.location)

    return ResolveReleaseOutput(
        response=response,
        diagnostics=parse_request(inp.path).diagnostics(),
    )


def run_describe(
    inp: DescribeArtifactInput,
    *,
    rules: ReleaseRulesPort | None = None,
) -> ArtifactOutput:
    """
    Describe the artifact a version/platform maps to.

    Args:
        inp: Input containing version, os and arch.
        rules: Optional rules port for configuration.

    Returns:
        ArtifactOutput with epoch, filename and download URL.
    """
    config = _build_config(rules)
    filename = artifact_filename(inp.version, inp.os, inp.arch, config)

    return ArtifactOutput(
        epoch=classify_epoch(inp.version, config),
        filename=filename,
        url=download_url(inp.version, filename, config),
    )


def run(
    inp: ResolveReleaseInput | DescribeArtifactInput,
    *,
    rules: ReleaseRulesPort | None = None,
) -> ResolveReleaseOutput | ArtifactOutput:
    """
    Main entry point for the releases component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, ResolveReleaseInput):
        return run_resolve(inp, rules=rules)
    elif isinstance(inp, DescribeArtifactInput):
        return run_describe(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
