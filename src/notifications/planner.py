"""
Notification planning for matched translator teams.

Two modes share the same candidate set, every resolved member except the
pull request author:

- review: candidates are requested as reviewers in fixed-size batches.
- ping: candidates already mentioned in one of the bot's own comments are
  dropped, and the rest are mentioned in a single new comment. The bot's
  earlier comments are the only record of who was pinged.
"""

import re
from collections.abc import Iterable, Iterator
from typing import Protocol, TypeVar

import structlog

from src.core.constants import DEFAULT_BOT_LOGIN, MENTION_PATTERN, REVIEW_REQUEST_BATCH_SIZE
from src.core.models import IssueComment
from src.presentation import github_formatter

logger = structlog.get_logger()

T = TypeVar("T")

_MENTION_RE = re.compile(MENTION_PATTERN)


class PullRequestActions(Protocol):
    """The pull request reads and writes the planner performs."""

    async def list_issue_comments(self, issue_number: int) -> list[IssueComment]: ...

    async def request_reviewers(self, pr_number: int, reviewers: list[str]) -> object: ...

    async def create_issue_comment(self, issue_number: int, body: str) -> object: ...


def batched(items: list[T], size: int) -> Iterator[list[T]]:
    """Yield consecutive chunks of at most ``size`` items, preserving order."""
    if size < 1:
        raise ValueError("batch size must be at least 1")
    for start in range(0, len(items), size):
        yield items[start : start + size]


def reviewer_candidates(members: Iterable[str], author: str | None) -> list[str]:
    """Distinct members in first-seen order, without the pull request author."""
    return [login for login in dict.fromkeys(members) if login != author]


def extract_mentions(comments: Iterable[IssueComment], bot_login: str) -> set[str]:
    """Collect every @login mentioned in comments written by ``bot_login``."""
    mentioned: set[str] = set()
    for comment in comments:
        if comment.author != bot_login:
            continue
        mentioned.update(_MENTION_RE.findall(comment.body))
    return mentioned


def ping_candidates(members: Iterable[str], author: str | None, mentioned: set[str]) -> list[str]:
    return [login for login in reviewer_candidates(members, author) if login not in mentioned]


class NotificationPlanner:
    """Computes who to notify on a pull request and performs the notification."""

    def __init__(
        self,
        github: PullRequestActions,
        bot_login: str = DEFAULT_BOT_LOGIN,
        review_batch_size: int = REVIEW_REQUEST_BATCH_SIZE,
    ):
        self.github = github
        self.bot_login = bot_login
        self.review_batch_size = review_batch_size

    async def request_reviews(self, pr_number: int, members: Iterable[str], author: str | None) -> list[str]:
        """
        Request review from every candidate, one batch at a time.

        A failing batch raises; batches already sent stay requested.

        Returns:
            The logins review was requested from
        """
        reviewers = reviewer_candidates(members, author)
        if not reviewers:
            logger.info("no_reviewers_to_request", pr_number=pr_number)
            return []

        for batch in batched(reviewers, self.review_batch_size):
            logger.info("requesting_review", pr_number=pr_number, reviewers=batch)
            await self.github.request_reviewers(pr_number, batch)

        return reviewers

    async def ping_translators(self, pr_number: int, members: Iterable[str], author: str | None) -> list[str]:
        """
        Mention translators the bot has not mentioned on this pull request yet.

        Returns:
            The logins mentioned in the new comment, empty when none was posted
        """
        comments = await self.github.list_issue_comments(pr_number)
        mentioned = extract_mentions(comments, self.bot_login)
        translators = ping_candidates(members, author, mentioned)

        if not translators:
            logger.info("no_translators_to_ping", pr_number=pr_number, already_mentioned=sorted(mentioned))
            return []

        logger.info("pinging_translators", pr_number=pr_number, translators=translators)
        await self.github.create_issue_comment(pr_number, github_formatter.format_translator_ping_comment(translators))
        return translators
