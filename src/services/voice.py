"""TwiML rendering for the voice webhook."""

from xml.etree import ElementTree as ET

GREETING = (
    "Hello! This is your AI Survey System. The system is working correctly. "
    "This call uses AI technology for survey purposes. Thank you for testing!"
)
VOICE = "alice"


def render_say(message: str, voice: str = VOICE) -> str:
    """Return a TwiML ``<Response>`` that speaks *message* once."""
    response = ET.Element("Response")
    say = ET.SubElement(response, "Say", voice=voice)
    say.text = message
    body = ET.tostring(response, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}'


#: The webhook reply never depends on the inbound call, so render it once.
GREETING_TWIML: str = render_say(GREETING)
