"""
Application-wide constants.
"""

# Only teams nested under this parent may be notified automatically.
DEFAULT_GOVERNANCE_TEAM = "localization"

# Locale team slugs look like "fr_FR" or "pt_BR".
LOCALE_TEAM_PATTERN = r"^[a-z]{2}_[A-Z]{2}$"

# GitHub rejects review requests naming more than 10 reviewers at once.
REVIEW_REQUEST_BATCH_SIZE = 10

MENTION_PATTERN = r"@([A-Za-z0-9_-]+)"

DEFAULT_CODEOWNERS_PATH = "CODEOWNERS"

DEFAULT_BOT_LOGIN = "ghostty-bot"

PR_ACTIONS_PROCESS = frozenset({"opened", "synchronize"})
