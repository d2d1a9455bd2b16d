from pathlib import Path

import pytest

from src.adapters.release_rules import RulesReleaseAdapter
from src.rules.loader import load_rules

PROJECT_ROOT = Path(__file__).parent.parent

CUSTOM_RULES = """\
project:
  slug: test-redirect
  rules_version: "test"
releases:
  host: example.com
  org: acme
  project: tool
  artifact_prefix: tool
  path_prefix: downloads
  legacy_epochs: ["0"]
  tarball_extension: .tgz
"""


@pytest.fixture
def project_rules_path() -> Path:
    """The rules.yaml shipped at the project root."""
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def custom_rules_path(tmp_path: Path) -> Path:
    path = tmp_path / "rules.yaml"
    path.write_text(CUSTOM_RULES)
    return path


@pytest.fixture
def custom_release_rules(custom_rules_path: Path) -> RulesReleaseAdapter:
    """Release rules pointing at a non-default host and naming scheme."""
    return RulesReleaseAdapter.from_rules(load_rules(custom_rules_path))
