"""
Core error classes for the localization review bot.
"""


class GitHubRateLimitError(Exception):
    """Raised when GitHub API rate limit is exceeded."""

    pass


class GitHubResourceNotFoundError(Exception):
    """Raised when a specific GitHub resource is not found."""

    pass


class CodeOwnersNotFoundError(Exception):
    """Raised when the repository has no readable CODEOWNERS file."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"CODEOWNERS file not found at '{path}'")
