from src.ownership.codeowners import CodeOwnersParser, find_owners, parse_codeowners
from src.ownership.teams import TeamResolver

__all__ = [
    "CodeOwnersParser",
    "TeamResolver",
    "find_owners",
    "parse_codeowners",
]
