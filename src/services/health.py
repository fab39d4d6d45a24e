"""Assemble the ``/health`` self-diagnostic report."""

from datetime import UTC, datetime

from src.config import Settings
from src.database import DatabaseProbe, probe_database
from src.schemas.health import HealthReport, ServiceConfiguration, ServiceState


def _service_state(configured: bool) -> ServiceState:
    return "configured" if configured else "not_configured"


def service_configuration(settings: Settings) -> ServiceConfiguration:
    """Report which third-party credentials are present (never validated)."""
    return ServiceConfiguration(
        twilio=_service_state(settings.twilio_configured),
        openai=_service_state(settings.openai_configured),
    )


async def build_health_report(settings: Settings) -> HealthReport:
    """Return a ``HealthReport`` for the running process.

    The database probe only runs when ``DATABASE_URL`` is set.  Its outcome
    is folded into the ``database`` / ``database_error`` fields; a failed
    probe never turns the report itself into an error.
    """
    report = HealthReport(
        status="healthy",
        timestamp=datetime.now(UTC),
        environment=settings.node_env,
        services=service_configuration(settings),
    )

    if settings.database_url:
        probe: DatabaseProbe = await probe_database(
            settings.database_url, settings.database_probe_timeout
        )
        report.database = "connected" if probe.connected else "disconnected"
        report.database_error = probe.error

    return report
