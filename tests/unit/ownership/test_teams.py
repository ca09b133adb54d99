from unittest.mock import AsyncMock

import pytest
from structlog.testing import capture_logs

from src.core.errors import GitHubResourceNotFoundError
from src.ownership.teams import TeamResolver


@pytest.mark.asyncio
async def test_governed_team_resolves_to_members(fake_github):
    fake_github.teams["fr_FR"] = "localization"
    fake_github.members["fr_FR"] = ["alice", "bob"]

    members = await TeamResolver(fake_github).resolve("fr_FR")

    assert members == ["alice", "bob"]


@pytest.mark.asyncio
async def test_team_with_other_parent_resolves_to_nobody(fake_github):
    fake_github.teams["fr_FR"] = "engineering"
    fake_github.members["fr_FR"] = ["alice", "bob"]

    with capture_logs() as logs:
        members = await TeamResolver(fake_github).resolve("fr_FR")

    assert members == []
    fake_github.list_team_members.assert_not_called()
    warnings = [entry for entry in logs if entry["log_level"] == "warning"]
    assert len(warnings) == 1
    assert warnings[0]["event"] == "team_not_governed"
    assert warnings[0]["team"] == "fr_FR"
    assert warnings[0]["parent"] == "engineering"


@pytest.mark.asyncio
async def test_top_level_team_resolves_to_nobody(fake_github):
    fake_github.members["fr_FR"] = ["alice"]

    assert await TeamResolver(fake_github).resolve("fr_FR") == []


@pytest.mark.asyncio
async def test_resolution_is_repeatable(fake_github):
    fake_github.teams["de_DE"] = "localization"
    fake_github.members["de_DE"] = ["carol"]
    resolver = TeamResolver(fake_github)

    assert await resolver.resolve("de_DE") == await resolver.resolve("de_DE") == ["carol"]


@pytest.mark.asyncio
async def test_custom_governance_team(fake_github):
    fake_github.teams["fr_FR"] = "translators"
    fake_github.members["fr_FR"] = ["alice"]

    assert await TeamResolver(fake_github, governance_team="translators").resolve("fr_FR") == ["alice"]
    assert await TeamResolver(fake_github).resolve("fr_FR") == []


@pytest.mark.asyncio
async def test_resolve_all_flattens_in_team_order(fake_github):
    fake_github.teams.update({"de_DE": "localization", "fr_FR": "localization", "it_IT": "engineering"})
    fake_github.members.update({"de_DE": ["carol"], "fr_FR": ["alice", "bob"], "it_IT": ["dave"]})

    members = await TeamResolver(fake_github).resolve_all(["de_DE", "fr_FR", "it_IT"])

    assert members == ["carol", "alice", "bob"]


@pytest.mark.asyncio
async def test_resolve_all_fails_when_any_team_fails(fake_github):
    fake_github.teams["fr_FR"] = "localization"
    fake_github.members["fr_FR"] = ["alice"]
    original = fake_github.get_team.side_effect

    async def get_team(slug):
        if slug == "xx_XX":
            raise GitHubResourceNotFoundError("team not found")
        return await original(slug)

    fake_github.get_team.side_effect = get_team

    with pytest.raises(GitHubResourceNotFoundError):
        await TeamResolver(fake_github).resolve_all(["fr_FR", "xx_XX"])


@pytest.mark.asyncio
async def test_member_listing_error_propagates():
    directory = AsyncMock()
    directory.get_team.return_value.parent_slug = "localization"
    directory.list_team_members.side_effect = RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        await TeamResolver(directory).resolve("fr_FR")
