from pydantic import BaseModel, Field
from typing import Dict, Optional

# Voice platform request envelope (only the fields the skill reads)

class Slot(BaseModel):
    name: str
    value: Optional[str] = None

class Intent(BaseModel):
    name: str
    slots: Dict[str, Slot] = Field(default_factory=dict)

class SkillRequest(BaseModel):
    type: str = Field(description="LaunchRequest, IntentRequest or SessionEndedRequest")
    requestId: Optional[str] = None
    locale: Optional[str] = None
    reason: Optional[str] = Field(None, description="Set on SessionEndedRequest")
    intent: Optional[Intent] = None

class Session(BaseModel):
    sessionId: Optional[str] = None
    new: bool = False

class RequestEnvelope(BaseModel):
    version: str = "1.0"
    session: Optional[Session] = None
    request: SkillRequest

# Voice platform response envelope

class OutputSpeech(BaseModel):
    type: str = "PlainText"
    text: str

class Reprompt(BaseModel):
    outputSpeech: OutputSpeech

class SkillResponseBody(BaseModel):
    outputSpeech: Optional[OutputSpeech] = None
    reprompt: Optional[Reprompt] = None
    shouldEndSession: Optional[bool] = None

class ResponseEnvelope(BaseModel):
    version: str = "1.0"
    response: SkillResponseBody = Field(default_factory=SkillResponseBody)

# Direct lookup API

class LookupResponse(BaseModel):
    topic: str
    ok: bool
    text: Optional[str] = Field(None, description="First paragraph as plain text")
    error: Optional[str] = Field(None, description="Error type and description when ok is false")
