import time

import structlog

from src.core.config.github_config import GitHubConfig
from src.core.config.localization_config import LocalizationConfig, NotificationMode
from src.core.constants import PR_ACTIONS_PROCESS
from src.core.errors import CodeOwnersNotFoundError, GitHubResourceNotFoundError
from src.core.models import PullRequest
from src.core.utils.logging import log_operation
from src.event_processors.base import ProcessingResult, ProcessingState
from src.integrations.github.api import GitHubClient
from src.notifications.planner import NotificationPlanner
from src.ownership.codeowners import find_owners, parse_codeowners
from src.ownership.teams import TeamResolver

logger = structlog.get_logger()


class PullRequestProcessor:
    """
    Routes a pull request to the locale teams owning its changed files.

    Each call is a single stateless pass: changed files, CODEOWNERS, owning
    teams and their members, then review requests or a ping comment. The
    first failing step aborts the run; side effects already performed (for
    example earlier review batches) are kept.
    """

    def __init__(self, github_client: GitHubClient, github_config: GitHubConfig, localization: LocalizationConfig):
        self.github_client = github_client
        self.github_config = github_config
        self.localization = localization
        self.team_resolver = TeamResolver(github_client, governance_team=localization.governance_team)
        self.planner = NotificationPlanner(
            github_client,
            bot_login=localization.bot_login,
            review_batch_size=localization.review_batch_size,
        )

    async def on_pull_request_event(self, action: str | None, pull_request: PullRequest) -> ProcessingResult:
        """Process one pull request delivery."""
        start_time = time.time()
        pr_number = pull_request.number

        if action not in PR_ACTIONS_PROCESS:
            logger.info("pr_action_ignored", action=action, pr_number=pr_number)
            return ProcessingResult(
                state=ProcessingState.IGNORED,
                pr_number=pr_number,
                reason=f"PR action '{action}' is not processed",
            )

        async with log_operation(
            "localization_review",
            subject_ids={"repo": self.github_config.repo_full_name, "pr": str(pr_number)},
            action=action,
            mode=self.localization.mode.value,
        ):
            changed_files = await self.github_client.list_pull_request_files(pr_number)
            author = pull_request.author_login
            logger.info("pr_changed_files", pr_number=pr_number, files=changed_files, author=author)

            owners_map = parse_codeowners(
                await self._fetch_codeowners(),
                org=self.github_config.org,
                team_pattern=self.localization.team_pattern,
            )
            owners = sorted(find_owners(owners_map, changed_files))

            if not owners:
                return self._result(ProcessingState.NO_ACTION, pr_number, start_time, reason="No locale owners")

            members = await self.team_resolver.resolve_all(owners)

            if self.localization.mode == NotificationMode.PING:
                notified = await self.planner.ping_translators(pr_number, members, author)
            else:
                notified = await self.planner.request_reviews(pr_number, members, author)

        state = ProcessingState.NOTIFIED if notified else ProcessingState.NO_ACTION
        return self._result(state, pr_number, start_time, owners=owners, notified=notified)

    async def _fetch_codeowners(self) -> str:
        path = self.localization.codeowners_path
        try:
            return await self.github_client.get_file_content(path)
        except GitHubResourceNotFoundError as e:
            raise CodeOwnersNotFoundError(path) from e

    @staticmethod
    def _result(
        state: ProcessingState,
        pr_number: int,
        start_time: float,
        owners: list[str] | None = None,
        notified: list[str] | None = None,
        reason: str | None = None,
    ) -> ProcessingResult:
        return ProcessingResult(
            state=state,
            pr_number=pr_number,
            owners=owners or [],
            notified=notified or [],
            processing_time_ms=int((time.time() - start_time) * 1000),
            reason=reason,
        )
