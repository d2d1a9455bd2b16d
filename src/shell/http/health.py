"""
Health endpoints for the redirect service.

Key behaviors:
- /health: Summary of all checks; 503 only when a check is unhealthy
- /health/ready: Same checks as a readiness probe
- /health/live: Process is up
- Running on built-in release defaults reports degraded, which still serves
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse


class HealthStatus(str, Enum):
    """Health check status values."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    DEGRADED = "degraded"


@dataclass
class CheckResult:
    """Result of a single health check."""

    name: str
    status: HealthStatus
    message: str = ""
    latency_ms: float = 0.0
    details: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status.value,
            "message": self.message,
            "latency_ms": self.latency_ms,
        }


class HealthCheck(Protocol):
    name: str

    def check(self) -> CheckResult: ...


class StartupTracker:
    """Records when the lifespan finished loading rules."""

    _start_time: float | None = None

    @classmethod
    def mark_started(cls) -> None:
        cls._start_time = time.time()

    @classmethod
    def is_started(cls) -> bool:
        return cls._start_time is not None

    @classmethod
    def get_uptime_seconds(cls) -> float:
        if cls._start_time is None:
            return 0.0
        return time.time() - cls._start_time


class HealthCheckRegistry:
    """Ordered set of checks reported by the health endpoints."""

    def __init__(self) -> None:
        self._checks: list[HealthCheck] = []

    def register(self, check: HealthCheck) -> None:
        self._checks.append(check)

    def run_all(self) -> list[CheckResult]:
        return [check.check() for check in self._checks]

    def clear(self) -> None:
        self._checks = []


_registry = HealthCheckRegistry()


def get_health_registry() -> HealthCheckRegistry:
    return _registry


# --- Checks ---


class ProcessCheck:
    name = "process"

    def check(self) -> CheckResult:
        return CheckResult(
            name=self.name, status=HealthStatus.HEALTHY, message="Process is running"
        )


class StartupCheck:
    name = "startup"

    def check(self) -> CheckResult:
        if not StartupTracker.is_started():
            return CheckResult(
                name=self.name, status=HealthStatus.UNHEALTHY, message="Startup not complete"
            )
        return CheckResult(
            name=self.name,
            status=HealthStatus.HEALTHY,
            message="Startup complete",
            details={"uptime_seconds": StartupTracker.get_uptime_seconds()},
        )


class RulesCheck:
    """Re-load the rules file; no loader means built-in defaults are in use."""

    name = "rules"

    def __init__(self, load_fn: Callable[[], object] | None = None) -> None:
        self._load_fn = load_fn

    def check(self) -> CheckResult:
        if self._load_fn is None:
            return CheckResult(
                name=self.name,
                status=HealthStatus.DEGRADED,
                message="Using built-in release defaults",
            )

        start = time.time()
        try:
            self._load_fn()
        except (FileNotFoundError, ValueError) as e:
            return CheckResult(
                name=self.name,
                status=HealthStatus.UNHEALTHY,
                message=f"Rules error: {e!s}",
                latency_ms=(time.time() - start) * 1000,
            )
        return CheckResult(
            name=self.name,
            status=HealthStatus.HEALTHY,
            message="Rules loaded",
            latency_ms=(time.time() - start) * 1000,
        )


# --- Router ---


def summarize(results: list[CheckResult]) -> HealthStatus:
    """Unhealthy wins over degraded; no checks is healthy."""
    statuses = {r.status for r in results}
    if HealthStatus.UNHEALTHY in statuses:
        return HealthStatus.UNHEALTHY
    if HealthStatus.DEGRADED in statuses:
        return HealthStatus.DEGRADED
    return HealthStatus.HEALTHY


def _status_code(overall: HealthStatus) -> int:
    if overall == HealthStatus.UNHEALTHY:
        return status.HTTP_503_SERVICE_UNAVAILABLE
    return status.HTTP_200_OK


def create_health_router(
    version: str = "0.0.0",
    registry: HealthCheckRegistry | None = None,
) -> APIRouter:
    """
    Create FastAPI router for health endpoints.

    Args:
        version: Application version string
        registry: Health check registry (uses global if None)
    """
    router = APIRouter(tags=["health"])
    reg = registry or get_health_registry()

    @router.get("/health", response_model=None)
    def health_check() -> JSONResponse:
        results = reg.run_all()
        overall = summarize(results)
        return JSONResponse(
            content={
                "status": overall.value,
                "version": version,
                "uptime_seconds": StartupTracker.get_uptime_seconds(),
                "checks": [r.as_dict() for r in results],
            },
            status_code=_status_code(overall),
        )

    @router.get("/health/ready", response_model=None)
    def readiness_check() -> JSONResponse:
        results = reg.run_all()
        overall = summarize(results)
        return JSONResponse(
            content={
                "ready": overall != HealthStatus.UNHEALTHY,
                "checks": [r.as_dict() for r in results],
            },
            status_code=_status_code(overall),
        )

    @router.get("/health/live", response_model=None)
    def liveness_check() -> JSONResponse:
        return JSONResponse(
            content={"alive": True, "uptime_seconds": StartupTracker.get_uptime_seconds()}
        )

    return router


def setup_default_health_checks(
    registry: HealthCheckRegistry | None = None,
    rules_loader: Callable[[], object] | None = None,
) -> None:
    """Register process, startup and rules checks."""
    reg = registry or get_health_registry()
    reg.register(ProcessCheck())
    reg.register(StartupCheck())
    reg.register(RulesCheck(rules_loader))


def mark_startup_complete() -> None:
    StartupTracker.mark_started()
