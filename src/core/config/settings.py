"""
Main configuration class that composes all configs.
"""

import os

from dotenv import load_dotenv

from src.core.config.github_config import GitHubConfig
from src.core.config.localization_config import LocalizationConfig, NotificationMode
from src.core.config.logging_config import LoggingConfig
from src.core.constants import (
    DEFAULT_BOT_LOGIN,
    DEFAULT_CODEOWNERS_PATH,
    DEFAULT_GOVERNANCE_TEAM,
    LOCALE_TEAM_PATTERN,
    REVIEW_REQUEST_BATCH_SIZE,
)

# Load environment variables from a .env file
load_dotenv()


class Config:
    """Main configuration class."""

    def __init__(self) -> None:
        self.github = GitHubConfig(
            token=os.getenv("GITHUB_TOKEN", ""),
            org=os.getenv("ORG_NAME", ""),
            repo=os.getenv("REPO_NAME", ""),
            webhook_secret=os.getenv("WEBHOOK_SECRET", ""),
            api_base_url=os.getenv("GITHUB_API_BASE_URL", "https://api.github.com"),
        )

        raw_mode = os.getenv("L10N_NOTIFICATION_MODE", NotificationMode.REVIEW.value).lower()
        try:
            mode = NotificationMode(raw_mode)
        except ValueError:
            # Rejected in validate().
            mode = raw_mode

        raw_batch_size = os.getenv("L10N_REVIEW_BATCH_SIZE", str(REVIEW_REQUEST_BATCH_SIZE))
        try:
            review_batch_size = int(raw_batch_size)
        except ValueError:
            # Rejected in validate().
            review_batch_size = raw_batch_size

        self.localization = LocalizationConfig(
            governance_team=os.getenv("L10N_GOVERNANCE_TEAM", DEFAULT_GOVERNANCE_TEAM),
            team_pattern=os.getenv("L10N_TEAM_PATTERN", LOCALE_TEAM_PATTERN),
            codeowners_path=os.getenv("L10N_CODEOWNERS_PATH", DEFAULT_CODEOWNERS_PATH),
            review_batch_size=review_batch_size,
            bot_login=os.getenv("L10N_BOT_LOGIN", DEFAULT_BOT_LOGIN),
            mode=mode,
        )

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format=os.getenv("LOG_FORMAT", "%(asctime)s %(levelname)8s %(message)s"),
            json_logs=os.getenv("LOG_JSON", "false").lower() == "true",
        )

    def validate(self) -> bool:
        """Validate configuration."""
        errors = []

        if not self.github.token:
            errors.append("GITHUB_TOKEN is required")

        if not self.github.org:
            errors.append("ORG_NAME is required")

        if not self.github.repo:
            errors.append("REPO_NAME is required")

        if not self.github.webhook_secret:
            errors.append("WEBHOOK_SECRET is required")

        if not isinstance(self.localization.mode, NotificationMode):
            allowed = ", ".join(m.value for m in NotificationMode)
            errors.append(f"L10N_NOTIFICATION_MODE must be one of: {allowed}")

        if not isinstance(self.localization.review_batch_size, int):
            errors.append("L10N_REVIEW_BATCH_SIZE must be an integer")
        elif not 1 <= self.localization.review_batch_size <= REVIEW_REQUEST_BATCH_SIZE:
            errors.append(f"L10N_REVIEW_BATCH_SIZE must be between 1 and {REVIEW_REQUEST_BATCH_SIZE}")

        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

        return True


# Global config instance
config = Config()
