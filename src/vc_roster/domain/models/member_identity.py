"""Member identity domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MemberIdentity:
    """Identity fields available for a voice channel member."""

    account_handle: str
    display_name: str | None = None  # Server-level display name override
    nickname: str | None = None  # Server nickname override
