import asyncio
from collections.abc import Iterable
from typing import Protocol

import structlog

from src.core.constants import DEFAULT_GOVERNANCE_TEAM
from src.core.models import TeamMetadata

logger = structlog.get_logger()


class TeamDirectory(Protocol):
    """The team lookups a resolver needs from GitHub."""

    async def get_team(self, team_slug: str) -> TeamMetadata: ...

    async def list_team_members(self, team_slug: str) -> list[str]: ...


class TeamResolver:
    """
    Resolves locale teams to the logins of their members.

    A team is only trusted when it is nested directly under the governance
    team; any other team resolves to no members, whatever its membership.
    """

    def __init__(self, directory: TeamDirectory, governance_team: str = DEFAULT_GOVERNANCE_TEAM):
        self.directory = directory
        self.governance_team = governance_team

    async def resolve(self, team_slug: str) -> list[str]:
        """Return the member logins of a governed team, or [] for an ungoverned one."""
        logger.info("team_fetching", team=team_slug)
        team = await self.directory.get_team(team_slug)

        if team.parent_slug != self.governance_team:
            logger.warning(
                "team_not_governed",
                team=team_slug,
                parent=team.parent_slug,
                required_parent=self.governance_team,
            )
            return []

        members = await self.directory.list_team_members(team_slug)
        logger.info("team_members_fetched", team=team_slug, members=members)
        return members

    async def resolve_all(self, team_slugs: Iterable[str]) -> list[str]:
        """
        Resolve several teams concurrently and flatten their members in team order.

        A failure for any team fails the whole call; results of the other
        teams are discarded.
        """
        member_lists = await asyncio.gather(*(self.resolve(slug) for slug in team_slugs))
        return [member for members in member_lists for member in members]
