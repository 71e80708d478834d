"""User-facing notifications and navigation for the submission form."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from tqdm import tqdm

logger = logging.getLogger("snippet_share")


@dataclass(frozen=True, slots=True)
class Notification:
    level: str
    message: str


class Notifier:
    """Toast-style notifications shown to the user."""

    def success(self, message: str) -> None:
        raise NotImplementedError

    def error(self, message: str) -> None:
        raise NotImplementedError


@dataclass(slots=True)
class RecordingNotifier(Notifier):
    """Keep notifications in memory, in the order they were raised."""

    notifications: List[Notification] = field(default_factory=list)

    def success(self, message: str) -> None:
        self.notifications.append(Notification("success", message))

    def error(self, message: str) -> None:
        self.notifications.append(Notification("error", message))

    @property
    def messages(self) -> List[str]:
        return [notification.message for notification in self.notifications]

    def clear(self) -> None:
        self.notifications.clear()


class ConsoleNotifier(Notifier):
    def success(self, message: str) -> None:
        tqdm.write(f"✅ {message}")

    def error(self, message: str) -> None:
        tqdm.write(f"❌ {message}")


class Navigator:
    """Moves the user to another view of the application."""

    def push(self, path: str) -> None:
        raise NotImplementedError


@dataclass(slots=True)
class RecordingNavigator(Navigator):
    visited: List[str] = field(default_factory=list)

    def push(self, path: str) -> None:
        self.visited.append(path)


class ConsoleNavigator(Navigator):
    def push(self, path: str) -> None:
        logger.debug("Navigating to %s", path)
        tqdm.write(f"→ {path}")


__all__ = [
    "ConsoleNavigator",
    "ConsoleNotifier",
    "Navigator",
    "Notification",
    "Notifier",
    "RecordingNavigator",
    "RecordingNotifier",
]
