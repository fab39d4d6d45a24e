"""Router wiring: root-level endpoints plus the ``/api`` sub-tree."""

from fastapi import APIRouter

from src.api.health import router as health_router
from src.api.service import root_router as service_root_router
from src.api.service import router as status_router
from src.api.twilio import router as twilio_router

root_router = APIRouter()
root_router.include_router(service_root_router)
root_router.include_router(health_router)

api_router = APIRouter(prefix="/api")
api_router.include_router(status_router)
api_router.include_router(twilio_router)
