"""Mapping of Black Cat transaction statuses onto local status tags."""

from typing import Literal

StatusTag = Literal["pending", "paid", "cancelled", "refunded"]

REMOTE_STATUSES: dict[str, StatusTag] = {
    "PENDING": "pending",
    "PAID": "paid",
    "CANCELLED": "cancelled",
    "REFUNDED": "refunded",
}


def map_status(raw: str, strict: bool = False) -> StatusTag:
    """Map a remote status literal (any casing) to its local tag.

    Unknown values fall back to "pending" unless `strict` is set, in which
    case they raise.
    """

    tag = REMOTE_STATUSES.get((raw or "").upper())
    if tag is None:
        if strict:
            raise ValueError(f"Unknown gateway status: {raw!r}")
        return "pending"
    return tag
