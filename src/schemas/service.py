from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ServiceEndpoints(BaseModel):
    health: str
    surveys: str
    twilio: str


class ServiceInfo(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "name": "AI Survey System",
                "version": "1.0.0",
                "status": "running",
                "endpoints": {
                    "health": "/health",
                    "surveys": "/api/surveys",
                    "twilio": "/api/twilio",
                },
            }
        },
    )

    name: str
    version: str
    status: str
    endpoints: ServiceEndpoints


class StatusReport(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "api": "AI Survey System",
                "status": "operational",
                "timestamp": "2026-01-01T12:00:00.000000Z",
            }
        }
    )

    api: str
    status: str
    timestamp: datetime
