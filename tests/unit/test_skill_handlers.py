import asyncio
from unittest.mock import AsyncMock, patch

from app.schemas import RequestEnvelope
from app.skill import handlers
from app.skill.builder import ResponseBuilder


def envelope(request_type, intent=None, slots=None, **extra):
    request = {"type": request_type, "requestId": "req-1", **extra}
    if intent is not None:
        request["intent"] = {
            "name": intent,
            "slots": {name: {"name": name, "value": value} for name, value in (slots or {}).items()},
        }
    return RequestEnvelope(**{"version": "1.0", "request": request})


def dispatch(env):
    return asyncio.run(handlers.dispatch(env))


class TestResponseBuilder:
    def test_speak_only(self):
        response = ResponseBuilder().speak("Hi").get_response().response
        assert response.outputSpeech.text == "Hi"
        assert response.reprompt is None
        assert response.shouldEndSession is None

    def test_reprompt_keeps_session_open(self):
        response = ResponseBuilder().speak("Hi").reprompt("Still there?").get_response().response
        assert response.reprompt.outputSpeech.text == "Still there?"
        assert response.shouldEndSession is False

    def test_empty_response(self):
        response = ResponseBuilder().get_response().response
        assert response.outputSpeech is None


class TestDispatch:
    def test_launch(self):
        response = dispatch(envelope("LaunchRequest")).response
        assert response.outputSpeech.text == handlers.WELCOME_TEXT
        assert response.reprompt.outputSpeech.text == handlers.WELCOME_TEXT

    @patch("app.services.lookup.lookup", new_callable=AsyncMock)
    def test_search_intent(self, mock_lookup):
        mock_lookup.return_value = "Pizza is an Italian dish."
        response = dispatch(envelope("IntentRequest", "SearchIntent", {"Topic": "pizza"})).response

        mock_lookup.assert_awaited_once_with("pizza")
        assert response.outputSpeech.text == "Here is what I know about pizza: Pizza is an Italian dish."
        assert response.reprompt is None

    @patch("app.services.lookup.lookup", new_callable=AsyncMock)
    def test_search_intent_with_lookup_error_text(self, mock_lookup):
        mock_lookup.return_value = "Err: HttpStatusError: 404: en.wikipedia.org /wiki/Nope"
        response = dispatch(envelope("IntentRequest", "SearchIntent", {"Topic": "Nope"})).response
        assert response.outputSpeech.text.startswith("Here is what I know about Nope: Err:")

    @patch("app.services.lookup.lookup", new_callable=AsyncMock)
    def test_search_intent_without_topic(self, mock_lookup):
        response = dispatch(envelope("IntentRequest", "SearchIntent", {"Topic": None})).response

        mock_lookup.assert_not_awaited()
        assert response.outputSpeech.text == handlers.APOLOGY_TEXT
        assert response.shouldEndSession is False

    @patch("app.services.lookup.lookup", new_callable=AsyncMock)
    def test_search_intent_lookup_crash(self, mock_lookup):
        mock_lookup.side_effect = RuntimeError("unexpected")
        response = dispatch(envelope("IntentRequest", "SearchIntent", {"Topic": "pizza"})).response
        assert response.outputSpeech.text == handlers.APOLOGY_TEXT

    def test_help(self):
        response = dispatch(envelope("IntentRequest", "AMAZON.HelpIntent")).response
        assert response.outputSpeech.text == handlers.HELP_TEXT
        assert response.reprompt.outputSpeech.text == handlers.HELP_TEXT

    def test_cancel_and_stop(self):
        for intent in ("AMAZON.CancelIntent", "AMAZON.StopIntent"):
            response = dispatch(envelope("IntentRequest", intent)).response
            assert response.outputSpeech.text == "Goodbye!"

    def test_session_ended(self):
        response = dispatch(envelope("SessionEndedRequest", reason="USER_INITIATED")).response
        assert response.outputSpeech is None
        assert response.reprompt is None

    def test_unknown_intent_is_reflected(self):
        response = dispatch(envelope("IntentRequest", "OrderPizzaIntent")).response
        assert response.outputSpeech.text == "You just triggered OrderPizzaIntent"

    def test_unknown_request_type(self):
        response = dispatch(envelope("CanFulfillIntentRequest")).response
        assert response.outputSpeech.text == handlers.APOLOGY_TEXT

    def test_reflector_is_last(self):
        assert isinstance(handlers.REQUEST_HANDLERS[-1], handlers.IntentReflectorHandler)
