"""
Control messages for the Speech to Text WebSocket interface.

A recognition session opens with a start message describing the audio,
streams binary audio frames, and ends with a stop message.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class SpeechToTextStart(BaseModel):
    """Opens a recognition request and describes the audio that follows."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    action: Literal["start"] = "start"
    content_type: str = Field(
        ...,
        alias="content-type",
        description="MIME type of the audio",
        examples=["audio/l16;rate=16000", "audio/flac"],
    )
    continuous: Optional[bool] = None
    interim_results: Optional[bool] = None
    max_alternatives: Optional[int] = Field(default=None, ge=1)
    word_confidence: Optional[bool] = None
    timestamps: Optional[bool] = None
    inactivity_timeout: Optional[int] = Field(
        default=None,
        description="Seconds of silence before the session closes; -1 for never",
    )
    keywords: Optional[list[str]] = None
    keywords_threshold: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    profanity_filter: Optional[bool] = None
    smart_formatting: Optional[bool] = None

    def to_json(self) -> str:
        """Serialize to the wire form, leaving out unset options."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class SpeechToTextStop(BaseModel):
    """Signals the end of an audio transmission to Speech to Text."""

    model_config = ConfigDict(frozen=True)

    # Must be "stop" to end the request.
    action: Literal["stop"] = "stop"

    def to_json(self) -> str:
        return self.model_dump_json()
