import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.adapters.release_rules import RulesReleaseAdapter
from src.rules.loader import RULES_ENV_VAR, load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        override = os.environ.get(RULES_ENV_VAR)
        self.rules_path = Path(override) if override else self.base_dir / "rules.yaml"


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
def get_rules(settings: Settings = Depends(get_settings)) -> Rules | None:
    # Built-in defaults apply when no rules file is deployed
    if not settings.rules_path.exists():
        return None
    return _load_cached(settings.rules_path)


@lru_cache
def _load_cached(path: Path) -> Rules:
    return load_rules(path)


def get_release_rules(rules: Rules | None = Depends(get_rules)) -> RulesReleaseAdapter | None:
    if rules is None:
        return None
    return RulesReleaseAdapter.from_rules(rules)
