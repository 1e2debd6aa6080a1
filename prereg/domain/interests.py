"""Interest categories offered on the registration form."""

INTEREST_OPTIONS: dict[str, str] = {
    "habit": "Habit-building program",
    "work": "Co-working streams",
    "event": "Community events",
    "content": "Learning content",
    "project": "Team projects",
}


def interest_label(interest_id: str) -> str:
    """Display label for an interest id; unknown ids are shown as-is."""
    return INTEREST_OPTIONS.get(interest_id, interest_id)
