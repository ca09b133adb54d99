"""
GitHub configuration.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GitHubConfig:
    """GitHub configuration for the single repository the bot watches."""

    token: str
    org: str
    repo: str
    webhook_secret: str
    api_base_url: str = "https://api.github.com"

    @property
    def repo_full_name(self) -> str:
        return f"{self.org}/{self.repo}"

    @property
    def team_prefix(self) -> str:
        """Prefix used for org teams in CODEOWNERS, e.g. '@ghostty-org/'."""
        return f"@{self.org}/"
