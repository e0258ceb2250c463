"""
Request dispatch for the voice skill.

Handlers are tried top to bottom and the first one whose can_handle()
matches builds the response. Any exception raised while handling, or a
request nobody claims, ends up in ErrorHandler.
"""

from typing import List, Optional

from app.schemas import RequestEnvelope, ResponseEnvelope
from app.services import lookup as lookup_service
from .builder import ResponseBuilder

WELCOME_TEXT = "Welcome, ask me about some food?"
HELP_TEXT = "You can ask me to look for some food! How can I help?"
GOODBYE_TEXT = "Goodbye!"
APOLOGY_TEXT = "Sorry, I couldn't understand what you said. Please try again."

SEARCH_INTENT = "SearchIntent"
TOPIC_SLOT = "Topic"


class MissingSlotError(ValueError):
    pass


def _request_type(envelope: RequestEnvelope) -> str:
    return envelope.request.type

def _intent_name(envelope: RequestEnvelope) -> Optional[str]:
    intent = envelope.request.intent
    return intent.name if intent else None

def _is_intent(envelope: RequestEnvelope, *names: str) -> bool:
    return _request_type(envelope) == "IntentRequest" and _intent_name(envelope) in names


class RequestHandler:
    def can_handle(self, envelope: RequestEnvelope) -> bool:
        raise NotImplementedError

    async def handle(self, envelope: RequestEnvelope, builder: ResponseBuilder) -> ResponseEnvelope:
        raise NotImplementedError


class LaunchRequestHandler(RequestHandler):
    def can_handle(self, envelope):
        return _request_type(envelope) == "LaunchRequest"

    async def handle(self, envelope, builder):
        return builder.speak(WELCOME_TEXT).reprompt(WELCOME_TEXT).get_response()


class SearchIntentHandler(RequestHandler):
    """Looks the spoken topic up on the wiki and reads back the first paragraph."""

    def can_handle(self, envelope):
        return _is_intent(envelope, SEARCH_INTENT)

    async def handle(self, envelope, builder):
        slot = envelope.request.intent.slots.get(TOPIC_SLOT)
        if slot is None or not slot.value:
            raise MissingSlotError(f"{SEARCH_INTENT} arrived without a {TOPIC_SLOT} value")

        topic = slot.value
        content = await lookup_service.lookup(topic)
        return builder.speak(f"Here is what I know about {topic}: {content}").get_response()


class HelpIntentHandler(RequestHandler):
    def can_handle(self, envelope):
        return _is_intent(envelope, "AMAZON.HelpIntent")

    async def handle(self, envelope, builder):
        return builder.speak(HELP_TEXT).reprompt(HELP_TEXT).get_response()


class CancelAndStopIntentHandler(RequestHandler):
    def can_handle(self, envelope):
        return _is_intent(envelope, "AMAZON.CancelIntent", "AMAZON.StopIntent")

    async def handle(self, envelope, builder):
        return builder.speak(GOODBYE_TEXT).get_response()


class SessionEndedRequestHandler(RequestHandler):
    def can_handle(self, envelope):
        return _request_type(envelope) == "SessionEndedRequest"

    async def handle(self, envelope, builder):
        print(f"SESSION ENDED: {envelope.request.reason}")
        return builder.get_response()


class IntentReflectorHandler(RequestHandler):
    """Echoes any intent without a dedicated handler. Must stay last."""

    def can_handle(self, envelope):
        return _request_type(envelope) == "IntentRequest"

    async def handle(self, envelope, builder):
        return builder.speak(f"You just triggered {_intent_name(envelope)}").get_response()


class ErrorHandler:
    def handle(self, envelope: RequestEnvelope, error: Exception) -> ResponseEnvelope:
        print(f"~~~~ Error handled: {type(error).__name__}: {error}")
        return ResponseBuilder().speak(APOLOGY_TEXT).reprompt(APOLOGY_TEXT).get_response()


class NoHandlerFound(LookupError):
    pass


REQUEST_HANDLERS: List[RequestHandler] = [
    LaunchRequestHandler(),
    SearchIntentHandler(),
    HelpIntentHandler(),
    CancelAndStopIntentHandler(),
    SessionEndedRequestHandler(),
    IntentReflectorHandler(),
]
ERROR_HANDLER = ErrorHandler()


async def dispatch(envelope: RequestEnvelope) -> ResponseEnvelope:
    try:
        for handler in REQUEST_HANDLERS:
            if handler.can_handle(envelope):
                return await handler.handle(envelope, ResponseBuilder())
        raise NoHandlerFound(f"No handler for request type {_request_type(envelope)}")
    except Exception as e:
        return ERROR_HANDLER.handle(envelope, e)
