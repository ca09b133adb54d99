"""
Localization routing configuration.
"""

from dataclasses import dataclass
from enum import Enum

from src.core.constants import (
    DEFAULT_BOT_LOGIN,
    DEFAULT_CODEOWNERS_PATH,
    DEFAULT_GOVERNANCE_TEAM,
    LOCALE_TEAM_PATTERN,
    REVIEW_REQUEST_BATCH_SIZE,
)


class NotificationMode(str, Enum):
    """How matched translators are notified."""

    REVIEW = "review"
    PING = "ping"


@dataclass(frozen=True)
class LocalizationConfig:
    """Localization routing configuration."""

    governance_team: str = DEFAULT_GOVERNANCE_TEAM
    team_pattern: str = LOCALE_TEAM_PATTERN
    codeowners_path: str = DEFAULT_CODEOWNERS_PATH
    review_batch_size: int = REVIEW_REQUEST_BATCH_SIZE
    bot_login: str = DEFAULT_BOT_LOGIN
    mode: NotificationMode = NotificationMode.REVIEW
