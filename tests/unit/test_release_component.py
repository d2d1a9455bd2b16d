"""
Tests for the releases component entry points.
"""

from __future__ import annotations

import pytest

from src.adapters.release_rules import RulesReleaseAdapter
from src.components.releases import (
    DescribeArtifactInput,
    ResolveReleaseInput,
    VersionEpoch,
    run,
    run_describe,
    run_resolve,
)


class TestRunResolve:
    """Tests for run_resolve."""

    def test_redirect(self) -> None:
        output = run_resolve(ResolveReleaseInput(path="/releases/3.1.0/linux/amd64"))

        assert output.success
        assert output.target is not None
        assert output.target.endswith("/v3.1.0/kubebuilder_linux_amd64")
        assert output.diagnostics == {}

    def test_not_found_has_diagnostics(self) -> None:
        output = run_resolve(ResolveReleaseInput(path="/badprefix/3.1.0/linux/amd64"))

        assert not output.success
        assert output.target is None
        assert output.diagnostics["prefix"] == "badprefix"
        assert output.diagnostics["rawPath"] == "/badprefix/3.1.0/linux/amd64"

    def test_with_rules(self, custom_release_rules: RulesReleaseAdapter) -> None:
        output = run_resolve(
            ResolveReleaseInput(path="/downloads/0.5.0/linux/amd64"),
            rules=custom_release_rules,
        )

        assert output.target == (
            "https://example.com/acme/tool/releases/download/v0.5.0/tool_0.5.0_linux_amd64.tgz"
        )

    def test_rules_change_prefix(self, custom_release_rules: RulesReleaseAdapter) -> None:
        """Default prefix no longer matches under custom rules."""
        output = run_resolve(
            ResolveReleaseInput(path="/releases/3.1.0/linux/amd64"),
            rules=custom_release_rules,
        )

        assert not output.success

    def test_project_rules_match_defaults(self, project_rules_path) -> None:
        from src.rules.loader import load_rules

        rules = RulesReleaseAdapter.from_rules(load_rules(project_rules_path))
        inp = ResolveReleaseInput(path="/releases/1.0.8/darwin/arm64")

        assert run_resolve(inp, rules=rules) == run_resolve(inp)


class TestRunDescribe:
    """Tests for run_describe."""

    def test_legacy(self) -> None:
        output = run_describe(DescribeArtifactInput(version="2.3.1", os="linux", arch="amd64"))

        assert output.epoch is VersionEpoch.LEGACY_TARBALL
        assert output.filename == "kubebuilder_2.3.1_linux_amd64.tar.gz"
        assert output.url.endswith("/v2.3.1/kubebuilder_2.3.1_linux_amd64.tar.gz")

    def test_current(self) -> None:
        output = run_describe(DescribeArtifactInput(version="4.0.0", os="linux", arch="arm64"))

        assert output.epoch is VersionEpoch.CURRENT_BINARY
        assert output.filename == "kubebuilder_linux_arm64"


class TestRun:
    """Tests for run dispatch."""

    def test_dispatch_resolve(self) -> None:
        output = run(ResolveReleaseInput(path="/releases/3.1.0/linux/amd64"))
        assert output.success  # type: ignore[union-attr]

    def test_dispatch_describe(self) -> None:
        output = run(DescribeArtifactInput(version="3.1.0", os="linux", arch="amd64"))
        assert output.filename == "kubebuilder_linux_amd64"  # type: ignore[union-attr]

    def test_unknown_input(self) -> None:
        with pytest.raises(ValueError, match="Unknown input type"):
            run("not an input")  # type: ignore[arg-type]
