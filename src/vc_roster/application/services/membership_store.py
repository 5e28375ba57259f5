"""In-memory set of tracked member labels."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


class MembershipStore:
    """Authoritative view of who is currently in a monitored channel.

    Only holds state; writing it out is the write serializer's job.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        # dict keeps insertion order, which makes snapshots readable in logs
        self._labels: dict[str, None] = {}

    def replace_all(self, labels: Iterable[str]) -> None:
        """Discard current contents and install the given labels."""
        self._labels = dict.fromkeys(labels)
        logger.debug(f"Membership replaced: {len(self._labels)} label(s)")

    def add(self, label: str) -> bool:
        """Add a label. Returns False if it was already tracked."""
        if label in self._labels:
            return False
        self._labels[label] = None
        logger.debug(f"Membership add: '{label}' ({len(self._labels)} tracked)")
        return True

    def remove(self, label: str) -> bool:
        """Remove a label. Returns False if it was not tracked."""
        if label not in self._labels:
            return False
        del self._labels[label]
        logger.debug(f"Membership remove: '{label}' ({len(self._labels)} tracked)")
        return True

    def snapshot(self) -> list[str]:
        """Return a copy of the current labels."""
        return list(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._labels

    def __len__(self) -> int:
        return len(self._labels)
