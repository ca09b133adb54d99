"""
Shared fixtures and pytest configuration.

Ensures the project root is on sys.path so ``src.*`` imports resolve when
the package is not installed.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

ROOT = Path(__file__).resolve().parent.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.core.config.github_config import GitHubConfig  # noqa: E402
from src.core.config.localization_config import LocalizationConfig  # noqa: E402
from src.core.models import TeamMetadata  # noqa: E402
from src.integrations.github.api import GitHubClient  # noqa: E402


@pytest.fixture
def github_config() -> GitHubConfig:
    return GitHubConfig(token="test-token", org="org", repo="app", webhook_secret="s3cret")


@pytest.fixture
def localization_config() -> LocalizationConfig:
    return LocalizationConfig(bot_login="l10n-bot")


@pytest.fixture
def fake_github() -> AsyncMock:
    """A GitHubClient double backed by in-memory team and comment data."""
    github = AsyncMock(spec=GitHubClient)
    github.teams = {}
    github.members = {}

    async def get_team(slug: str) -> TeamMetadata:
        return TeamMetadata(slug=slug, parent_slug=github.teams.get(slug))

    async def list_team_members(slug: str) -> list[str]:
        return list(github.members.get(slug, []))

    github.get_team.side_effect = get_team
    github.list_team_members.side_effect = list_team_members
    github.list_issue_comments.return_value = []
    github.request_reviewers.return_value = {}
    github.create_issue_comment.return_value = {}
    return github
