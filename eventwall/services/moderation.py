"""Photo moderation status transitions."""
from eventwall.utils.exceptions import ConflictError

ACTION_STATUS: dict[str, str] = {
    "approve": "approved",
    "reject": "rejected",
    "archive": "archived",
}

# pending -> approved|rejected, approved <-> archived; rejected is terminal
ALLOWED_TRANSITIONS: dict[str, frozenset[str]] = {
    "pending": frozenset({"approved", "rejected"}),
    "approved": frozenset({"archived"}),
    "archived": frozenset({"approved"}),
    "rejected": frozenset(),
}


def next_status(current: str, action: str) -> str:
    """Return the status ``action`` moves a photo to, or raise ConflictError."""
    target = ACTION_STATUS[action]
    if target not in ALLOWED_TRANSITIONS.get(current, frozenset()):
        raise ConflictError(f"Cannot {action} a photo that is {current}")
    return target
