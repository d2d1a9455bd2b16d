"""
Tests for the command line interface.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from src.app_shell.cli import main


class TestResolveCommand:
    """Tests for `resolve`."""

    def test_redirect(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(
            ["--rules", str(tmp_path / "none.yaml"), "resolve", "/releases/3.1.0/linux/amd64"]
        )

        out = capsys.readouterr().out
        assert code == 0
        assert out.startswith("302 https://github.com/kubernetes-sigs/kubebuilder/")

    def test_not_found(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["--rules", str(tmp_path / "none.yaml"), "resolve", "/bad/3.1.0/linux/amd64"])

        out = capsys.readouterr().out
        assert code == 1
        assert out.startswith("404 ")
        assert '"prefix": "bad"' in out

    def test_json_output(self, custom_rules_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(
            ["--rules", str(custom_rules_path), "resolve", "--json", "/downloads/0.1.0/linux/amd64"]
        )

        payload = json.loads(capsys.readouterr().out)
        assert code == 0
        assert payload["statusCode"] == 302
        assert payload["headers"]["location"].endswith("/v0.1.0/tool_0.1.0_linux_amd64.tgz")

    def test_invalid_rules(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str], caplog: pytest.LogCaptureFixture
    ) -> None:
        """Broken rules file exits 1 without resolving."""
        path = tmp_path / "rules.yaml"
        path.write_text("releases: [")

        code = main(["--rules", str(path), "resolve", "/releases/3.1.0/linux/amd64"])

        assert code == 1
        assert capsys.readouterr().out == ""
        assert "Invalid YAML" in caplog.text


class TestDescribeCommand:
    """Tests for `describe`."""

    def test_describe(self, project_rules_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["--rules", str(project_rules_path), "describe", "10.0.0", "linux", "amd64"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Epoch: legacy-tarball" in out
        assert "File: kubebuilder_10.0.0_linux_amd64.tar.gz" in out

    def test_invalid_rules(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Rules failing validation exit 1."""
        path = tmp_path / "rules.yaml"
        path.write_text("project: {slug: x, rules_version: '1'}\nreleases:\n  org: ''\n")

        code = main(["--rules", str(path), "describe", "3.1.0", "linux", "amd64"])

        assert code == 1
        assert "Rules validation failed" in caplog.text


class TestCheckRulesCommand:
    """Tests for `check-rules`."""

    def test_valid(self, project_rules_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["--rules", str(project_rules_path), "check-rules"])

        assert code == 0
        assert "Rules OK: release-redirect" in capsys.readouterr().out

    def test_missing(self, tmp_path: Path) -> None:
        assert main(["--rules", str(tmp_path / "missing.yaml"), "check-rules"]) == 1

    def test_invalid(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("releases: [")

        assert main(["--rules", str(path), "check-rules"]) == 1
