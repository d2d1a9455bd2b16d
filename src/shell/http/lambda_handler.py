"""
Serverless entry point.

Adapts a platform event carrying a `path` field to the resolver and
returns the platform's {statusCode, headers, body} response shape.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from src.adapters.release_rules import RulesReleaseAdapter
from src.components.releases import ResolveReleaseInput, run_resolve
from src.rules.loader import RULES_ENV_VAR, load_rules

logger = logging.getLogger(__name__)


@lru_cache
def _release_rules() -> RulesReleaseAdapter | None:
    # Cached per runtime; rules are only read on cold start
    path = os.environ.get(RULES_ENV_VAR)
    if not path:
        return None
    return RulesReleaseAdapter.from_rules(load_rules(Path(path)))


def handle_event(
    event: dict[str, Any],
    rules: RulesReleaseAdapter | None = None,
) -> dict[str, Any]:
    """Resolve the event's path and serialize the response."""
    raw_path = event.get("path") or ""
    output = run_resolve(ResolveReleaseInput(path=str(raw_path)), rules=rules)
    return output.response.to_event_response()


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Platform function entry point."""
    return handle_event(event, rules=_release_rules())
