"""
Parsing and matching of CODEOWNERS entries owned by locale teams.

Only the first owner of each line is considered, and only when it is an
organization team whose slug looks like a locale (``fr_FR``). Paths are
matched by plain string prefix, so a ``po`` entry also owns ``polish.txt``.
"""

import re
from collections.abc import Iterable

import structlog

from src.core.constants import LOCALE_TEAM_PATTERN

logger = structlog.get_logger()


class CodeOwnersParser:
    """Parser for the locale-team entries of a CODEOWNERS file."""

    def __init__(self, codeowners_content: str, org: str, team_pattern: str = LOCALE_TEAM_PATTERN):
        self.codeowners_content = codeowners_content
        self.team_prefix = f"@{org}/"
        self.team_pattern = re.compile(team_pattern)
        self.owners_map = self._parse_codeowners()

    def _parse_codeowners(self) -> dict[str, str]:
        """
        Parse CODEOWNERS content into an ordered mapping of path prefix to team slug.

        A later line for the exact same path replaces the earlier owner.

        Returns:
            Dict of {path: team_slug} in document order
        """
        owners_map: dict[str, str] = {}

        for line_num, line in enumerate(self.codeowners_content.split("\n"), 1):
            stripped = line.strip()

            # Skip empty lines and comments
            if not stripped or stripped.startswith("#"):
                continue

            # Lines are expected to carry a single team owner; a missing
            # owner falls through to the pattern check below.
            parts = stripped.split()
            path = parts[0].removeprefix("/")
            owner = self._normalize_owner(parts[1] if len(parts) > 1 else None)

            if owner is None or not self.team_pattern.match(owner):
                logger.info("codeowner_skipped", owner=owner, path=path, line=line_num)
                continue

            owners_map[path] = owner
            logger.info("codeowner_found", owner=owner, path=path)

        return owners_map

    def _normalize_owner(self, owner: str | None) -> str | None:
        if owner is None:
            return None
        return owner.removeprefix(self.team_prefix)


def parse_codeowners(content: str, org: str, team_pattern: str = LOCALE_TEAM_PATTERN) -> dict[str, str]:
    """Parse CODEOWNERS content into a {path: locale_team} mapping."""
    return CodeOwnersParser(content, org, team_pattern).owners_map


def find_owners(owners_map: dict[str, str], changed_files: Iterable[str]) -> set[str]:
    """
    Find the teams owning at least one of the changed files.

    Args:
        owners_map: Parsed {path: team} mapping
        changed_files: Repository-relative paths touched by the pull request

    Returns:
        Set of distinct team slugs
    """
    found_owners: set[str] = set()

    for file_path in changed_files:
        matched = False
        for path, owner in owners_map.items():
            if file_path.startswith(path):
                logger.info("owner_matched", file=file_path, owner=owner, path=path)
                found_owners.add(owner)
                matched = True
        if not matched:
            logger.info("owner_not_found", file=file_path)

    return found_owners
