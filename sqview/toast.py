"""Short-lived notifications shown in the corner of the screen."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum

MAX_TOASTS = 5
MAX_TOAST_WIDTH = 60


class ToastKind(Enum):
    """The tone of a notification, which sets its colour and lifetime."""

    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"

    def lifetime(self) -> float:
        """Seconds the toast stays on screen."""
        return 5.0 if self is ToastKind.ERROR else 3.0


@dataclass
class Toast:
    """One notification and the monotonic time it was raised."""

    message: str
    kind: ToastKind
    created: float = field(default_factory=time.monotonic)


class ToastState:
    """The newest notifications, oldest first, at most five of them."""

    def __init__(self) -> None:
        self.toasts: deque[Toast] = deque(maxlen=MAX_TOASTS)

    def push(self, message: str, kind: ToastKind) -> None:
        """Add a notification, dropping the oldest beyond the limit."""
        self.toasts.append(Toast(str(message), kind))

    def tick(self, now: float | None = None) -> None:
        """Drop notifications whose lifetime has run out."""
        current = time.monotonic() if now is None else now
        kept = [t for t in self.toasts if current - t.created < t.kind.lifetime()]
        self.toasts.clear()
        self.toasts.extend(kept)


def toast_width(message: str, area_width: int) -> int:
    """Cells a toast occupies: padded message bytes, capped by 60 and the area."""
    padded = f"  {message}  "
    return min(len(padded.encode("utf-8")), MAX_TOAST_WIDTH, area_width)