from .common import ErrorCode, ErrorDetail, ErrorResponse
from .health import HealthErrorResponse, HealthReport, ServiceConfiguration, ServiceState
from .service import ServiceEndpoints, ServiceInfo, StatusReport

__all__ = [
    # common
    "ErrorCode",
    "ErrorDetail",
    "ErrorResponse",
    # health
    "HealthReport",
    "HealthErrorResponse",
    "ServiceConfiguration",
    "ServiceState",
    # service
    "ServiceEndpoints",
    "ServiceInfo",
    "StatusReport",
]
