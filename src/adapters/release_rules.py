"""
Rules adapter for the releases component.

Implements ReleaseRulesPort on top of validated Rules.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.rules.models import ReleaseRules, Rules


@dataclass(frozen=True)
class RulesReleaseAdapter:
    """Expose the releases section of Rules through ReleaseRulesPort."""

    releases: ReleaseRules

    @classmethod
    def from_rules(cls, rules: Rules) -> RulesReleaseAdapter:
        return cls(releases=rules.releases)

    def get_host(self) -> str:
        return self.releases.host

    def get_org(self) -> str:
        return self.releases.org

    def get_project(self) -> str:
        return self.releases.project

    def get_artifact_prefix(self) -> str:
        return self.releases.artifact_prefix

    def get_path_prefix(self) -> str:
        return self.releases.path_prefix

    def get_legacy_epochs(self) -> list[str]:
        return list(self.releases.legacy_epochs)

    def get_tarball_extension(self) -> str:
        return self.releases.tarball_extension
