"""
Release Download Routes.

HTTP integration for versioned release redirects.

Key behaviors:
- Catch-all route so any mount prefix or stage segment is accepted
- Resolver response is returned verbatim (status, headers, body)
- Redirects are not followed server-side
- HEAD is answered like GET
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from src.adapters.release_rules import RulesReleaseAdapter
from src.api.deps import get_release_rules
from src.components.releases import ResolveReleaseInput, run_resolve

router = APIRouter()


@router.api_route("/{path:path}", methods=["GET", "HEAD"], response_model=None)
def handle_release(
    request: Request,
    rules: RulesReleaseAdapter | None = Depends(get_release_rules),
) -> Response:
    """Redirect a release download path to its artifact, or 404."""
    output = run_resolve(ResolveReleaseInput(path=request.url.path), rules=rules)
    response = output.response

    return Response(
        content=response.body,
        status_code=response.status_code,
        headers=response.headers,
    )
