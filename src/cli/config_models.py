"""Pydantic configuration models for kbchat."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class BotConfig(BaseModel):
    """Names shown in front of each chat line."""

    bot_name: str = "Chatbot"
    user_name: str = "User"

    @field_validator("bot_name", "user_name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name must not be empty")
        return v


class LimitsConfig(BaseModel):
    """Input/output bounds applied at the chat boundary."""

    max_input: int = 256
    max_entity: int = 256
    max_response: int = 256
    max_facts: Optional[int] = None  # None = unbounded store

    @field_validator("max_input", "max_entity", "max_response")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"Limit must be positive, got {v}")
        return v

    @field_validator("max_facts")
    @classmethod
    def validate_max_facts(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 0:
            raise ValueError(f"max_facts must be >= 0, got {v}")
        return v


class PathsConfig(BaseModel):
    """File paths configuration."""

    knowledge_file: Optional[Path] = None
    log_file: Optional[Path] = None

    @field_validator("knowledge_file")
    @classmethod
    def validate_knowledge_file(cls, v: Optional[Path]) -> Optional[Path]:
        if v is not None and v.suffix != ".ini":
            raise ValueError(f"knowledge_file must be a .ini file, got {v}")
        return v

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        if self.knowledge_file:
            self.knowledge_file = self.knowledge_file.expanduser()
        if self.log_file:
            self.log_file = self.log_file.expanduser()
        return self


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    json_mode: bool = Field(default=False, alias="json")

    model_config = {"populate_by_name": True}

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class KBChatConfig(BaseModel):
    """Main configuration model."""

    bot: BotConfig = Field(default_factory=BotConfig)
    limits: LimitsConfig = Field(default_factory=LimitsConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "KBChatConfig":
        """Create config from dict, converting string paths."""
        paths = data.get("paths")
        if isinstance(paths, dict):
            for key in ["knowledge_file", "log_file"]:
                if isinstance(paths.get(key), str):
                    paths[key] = Path(paths[key])
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        """Convert to plain dict (``logging.json`` keeps its file name)."""
        return self.model_dump(mode="python", by_alias=True)
