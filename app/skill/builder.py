from typing import Optional
from app.schemas import OutputSpeech, Reprompt, ResponseEnvelope, SkillResponseBody

class ResponseBuilder:
    """Accumulates speech for one skill response."""

    def __init__(self):
        self._speech: Optional[str] = None
        self._reprompt: Optional[str] = None

    def speak(self, text: str) -> "ResponseBuilder":
        self._speech = text
        return self

    def reprompt(self, text: str) -> "ResponseBuilder":
        self._reprompt = text
        return self

    def get_response(self) -> ResponseEnvelope:
        body = SkillResponseBody()
        if self._speech is not None:
            body.outputSpeech = OutputSpeech(text=self._speech)
        if self._reprompt is not None:
            # A reprompt only makes sense while the session stays open
            body.reprompt = Reprompt(outputSpeech=OutputSpeech(text=self._reprompt))
            body.shouldEndSession = False
        return ResponseEnvelope(response=body)
