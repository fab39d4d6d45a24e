"""Twilio voice webhook."""

from fastapi import APIRouter
from fastapi.responses import Response

from src.services.voice import GREETING_TWIML

router = APIRouter(prefix="/twilio", tags=["Twilio"])


@router.post(
    "/voice",
    response_class=Response,
    responses={200: {"content": {"text/xml": {}}, "description": "TwiML voice response"}},
)
async def voice_webhook() -> Response:
    """Answer an incoming call with a fixed spoken greeting.

    Twilio posts form-encoded call metadata; none of it influences the reply,
    so the body is never read.
    """
    return Response(content=GREETING_TWIML, media_type="text/xml")
