"""Alexa Skill request/response models."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field


class AlexaSlot(BaseModel):
    """Alexa slot value."""

    name: str
    value: str | None = None


class AlexaIntent(BaseModel):
    """Alexa intent with slots."""

    name: str | None = None
    slots: dict[str, AlexaSlot] = {}

    def slot_value(self, slot_name: str) -> str | None:
        """Return the stripped slot value, or None when absent or blank."""
        slot = self.slots.get(slot_name)
        if slot is None or slot.value is None:
            return None
        return slot.value.strip() or None


class AlexaRequest(BaseModel):
    """Alexa request payload."""

    type: str
    requestId: str | None = None
    intent: AlexaIntent | None = None
    locale: str = "en-US"
    reason: str | None = None


class AlexaSession(BaseModel):
    """Alexa session information.

    ``attributes`` is the only state carried between turns of a dialog and
    is mutated in place by the intent handlers.
    """

    sessionId: str = ""
    new: bool = True
    attributes: dict[str, Any] = Field(default_factory=dict)


class AlexaRequestEnvelope(BaseModel):
    """Full Alexa request envelope."""

    version: str = "1.0"
    session: AlexaSession = Field(default_factory=AlexaSession)
    request: AlexaRequest
    context: dict[str, Any] = {}


class PlainTextSpeech(BaseModel):
    """Speech rendered as plain text."""

    type: Literal["PlainText"] = "PlainText"
    text: str


class SsmlSpeech(BaseModel):
    """Speech marked up with SSML tags."""

    type: Literal["SSML"] = "SSML"
    ssml: str


OutputSpeech = Annotated[PlainTextSpeech | SsmlSpeech, Field(discriminator="type")]


class AlexaReprompt(BaseModel):
    """Speech played when the user does not answer."""

    outputSpeech: OutputSpeech


class AlexaCard(BaseModel):
    """Alexa card for visual display."""

    type: str = "Simple"
    title: str
    content: str


class AlexaResponseBody(BaseModel):
    """Alexa response body."""

    outputSpeech: OutputSpeech
    reprompt: AlexaReprompt | None = None
    card: AlexaCard | None = None
    shouldEndSession: bool = True


class AlexaResponse(BaseModel):
    """Full Alexa response envelope."""

    version: str = "1.0"
    sessionAttributes: dict[str, Any] = {}
    response: AlexaResponseBody
