from src.services.health import build_health_report, service_configuration
from src.services.voice import GREETING, GREETING_TWIML, render_say

__all__ = [
    # health
    "build_health_report",
    "service_configuration",
    # voice
    "GREETING",
    "GREETING_TWIML",
    "render_say",
]
