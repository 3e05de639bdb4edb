"""Progress of an outgoing transaction, as reported to the user."""

from __future__ import annotations

import time
from dataclasses import dataclass


def now() -> int:
    """Return the current Unix time in whole seconds."""
    return int(time.time())


@dataclass
class SendProgress:
    """The state of the most recent send, identified by an increasing ``id``."""

    id: int = 0
    is_send_in_progress: bool = False
    progress: int = 0
    total: int = 0
    last_error: str | None = None
    last_txid: str | None = None

    def reset(self) -> None:
        """Blank the status for a new send, moving on to the next id."""
        self.id += 1
        self.is_send_in_progress = False
        self.progress = 0
        self.total = 0
        self.last_error = None
        self.last_txid = None

    def fail(self, error: str) -> None:
        """Record that the current send ended with ``error``."""
        self.is_send_in_progress = False
        self.last_error = error

    def succeed(self, txid: str) -> None:
        """Record that the current send finished as transaction ``txid``."""
        self.is_send_in_progress = False
        self.last_txid = txid