"""Platform-neutral skill response."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from .alexa import (
    AlexaCard,
    AlexaReprompt,
    AlexaResponse,
    AlexaResponseBody,
    OutputSpeech,
    PlainTextSpeech,
    SsmlSpeech,
)


def plain(text: str) -> PlainTextSpeech:
    """Plain text speech."""
    return PlainTextSpeech(text=text)


def ssml(markup: str) -> SsmlSpeech:
    """SSML speech; markup must already be wrapped in <speak> tags."""
    return SsmlSpeech(ssml=markup)


class SkillResponse(BaseModel):
    """What a handler answers with.

    A response is either a tell (ends the session, no reprompt) or an ask
    (keeps the session open and carries a reprompt).
    """

    speech: OutputSpeech
    reprompt: OutputSpeech | None = None
    card_title: str | None = None
    card_body: str | None = None
    should_end_session: bool = True
    session_attributes: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_ask_or_tell(self) -> "SkillResponse":
        if self.should_end_session and self.reprompt is not None:
            raise ValueError("a tell response cannot carry a reprompt")
        if not self.should_end_session and self.reprompt is None:
            raise ValueError("an ask response needs a reprompt")
        return self

    @classmethod
    def tell(
        cls,
        speech: OutputSpeech,
        card_title: str | None = None,
        card_body: str | None = None,
    ) -> "SkillResponse":
        """Build a response that ends the session."""
        return cls(speech=speech, card_title=card_title, card_body=card_body)

    @classmethod
    def ask(cls, speech: OutputSpeech, reprompt: OutputSpeech) -> "SkillResponse":
        """Build a response that waits for the user's answer."""
        return cls(speech=speech, reprompt=reprompt, should_end_session=False)

    @property
    def spoken_text(self) -> str:
        """Main speech as text or SSML markup."""
        if isinstance(self.speech, SsmlSpeech):
            return self.speech.ssml
        return self.speech.text

    @property
    def is_ssml(self) -> bool:
        """Whether the main speech is SSML."""
        return self.speech.type == "SSML"

    @property
    def reprompt_text(self) -> str | None:
        """Reprompt as text or SSML markup, None for a tell."""
        if self.reprompt is None:
            return None
        if isinstance(self.reprompt, SsmlSpeech):
            return self.reprompt.ssml
        return self.reprompt.text

    def to_alexa(self) -> AlexaResponse:
        """Convert to the Alexa response envelope."""
        body = AlexaResponseBody(
            outputSpeech=self.speech,
            shouldEndSession=self.should_end_session,
        )
        if self.reprompt is not None:
            body.reprompt = AlexaReprompt(outputSpeech=self.reprompt)
        if self.card_title and self.card_body is not None:
            body.card = AlexaCard(title=self.card_title, content=self.card_body)

        return AlexaResponse(sessionAttributes=self.session_attributes, response=body)
