def format_mentions(logins: list[str]) -> str:
    """Render logins as comma-separated @mentions."""
    return ", ".join(f"@{login}" for login in logins)


def format_translator_ping_comment(logins: list[str]) -> str:
    """Comment asking translators to review localization changes on a pull request."""
    return (
        f"{format_mentions(logins)}: this pull request changes localization files you maintain. "
        "Please take a look when you have a moment."
    )
