def build_full_text(title: str, description: str) -> str:
    """
    Combines an issue title and description into the text blob fed to the scorers.

    Args:
        title (str): The issue title. May be empty.
        description (str): The issue description. May be empty.

    Returns:
        str: "<title> <description>" with surrounding whitespace removed.
    """
    # None is tolerated so callers can pass optional form fields straight through
    return f"{title or ''} {description or ''}".strip()
