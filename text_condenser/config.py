from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


class InvalidConfigurationError(ValueError):
    """Raised when a summarizer setting is out of range."""


@dataclass
class SummarizerConfig:
    summary_sentences: int = 6       # K, sentences kept in the summary
    message_window: int = 400        # most recent items fed to the summarizer
    message_threshold: int = 100     # item count before an automatic run fires
    cooldown_seconds: float = 30.0   # minimum gap between automatic runs
    position_decay: int = 8          # sentences per position-bonus step
    min_token_length: int = 3
    languages: Tuple[str, ...] = ("en", "de")

    def validate(self) -> "SummarizerConfig":
        if self.summary_sentences < 1:
            raise InvalidConfigurationError(
                f"summary_sentences must be >= 1, got {self.summary_sentences}")
        if self.message_window < 1:
            raise InvalidConfigurationError(
                f"message_window must be >= 1, got {self.message_window}")
        if self.message_threshold < 1:
            raise InvalidConfigurationError(
                f"message_threshold must be >= 1, got {self.message_threshold}")
        if self.cooldown_seconds < 0:
            raise InvalidConfigurationError(
                f"cooldown_seconds must be >= 0, got {self.cooldown_seconds}")
        if self.position_decay < 1:
            raise InvalidConfigurationError(
                f"position_decay must be >= 1, got {self.position_decay}")
        if self.min_token_length < 1:
            raise InvalidConfigurationError(
                f"min_token_length must be >= 1, got {self.min_token_length}")
        return self
