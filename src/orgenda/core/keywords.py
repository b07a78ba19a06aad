"""Actionable heading keywords - pure configuration lookup."""

DEFAULT_KEYWORDS = ("TODO", "DONE")


def get_actionable_keywords(configured: list[str] | None = None) -> list[str]:
    """
    Return the ordered list of actionable keywords.

    Falls back to DEFAULT_KEYWORDS when nothing is configured.
    Pure function - no I/O.
    """
    if not configured:
        return list(DEFAULT_KEYWORDS)

    keywords = []
    for kw in configured:
        kw = kw.strip()
        if kw and kw not in keywords:
            keywords.append(kw)
    return keywords or list(DEFAULT_KEYWORDS)
