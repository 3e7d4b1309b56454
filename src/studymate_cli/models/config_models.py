"""Configuration models for StudyMate CLI."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from studymate_cli.models.chat import (
    DEFAULT_GREETING,
    DEFAULT_QUICK_PROMPTS,
    DEFAULT_REPLIES,
)
from studymate_cli.models.focus.timer import DEFAULT_FOCUS_SECONDS


class ChatConfig(BaseModel):
    """Assistant chat configuration."""

    reply_delay_ms: int = Field(default=1500, description="Simulated reply latency")
    greeting: str = Field(default=DEFAULT_GREETING)
    quick_prompts: list[str] = Field(default_factory=lambda: list(DEFAULT_QUICK_PROMPTS))
    replies: list[str] = Field(default_factory=lambda: list(DEFAULT_REPLIES))

    @field_validator("reply_delay_ms")
    @classmethod
    def validate_delay(cls, v: int) -> int:
        if v < 0:
            raise ValueError("reply_delay_ms must be >= 0")
        return v

    @field_validator("greeting")
    @classmethod
    def validate_greeting(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("greeting must not be blank")
        return v

    @field_validator("replies")
    @classmethod
    def validate_replies(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("replies catalog must not be empty")
        return v

    @property
    def reply_delay(self) -> float:
        """Reply latency in seconds."""
        return self.reply_delay_ms / 1000


class FocusConfig(BaseModel):
    """Focus timer and app-blocking configuration."""

    default_seconds: int = Field(default=DEFAULT_FOCUS_SECONDS)
    tick_seconds: float = Field(default=1.0)
    restore_blocks_on_exit: bool = Field(
        default=False,
        description="Restore per-app block flags when study mode is turned off",
    )

    @field_validator("default_seconds")
    @classmethod
    def validate_default_seconds(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("default_seconds must be > 0")
        return v

    @field_validator("tick_seconds")
    @classmethod
    def validate_tick(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("tick_seconds must be > 0")
        return v


class OutputConfig(BaseModel):
    """Output configuration."""

    color: bool = Field(default=True)


class AppConfig(BaseModel):
    """Main configuration."""

    chat: ChatConfig = Field(default_factory=ChatConfig)
    focus: FocusConfig = Field(default_factory=FocusConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
