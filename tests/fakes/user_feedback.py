"""Fake UserFeedback that captures notices for assertions."""

from projrun.core.user_feedback import UserFeedback


class FakeUserFeedback(UserFeedback):
    """Captures every notice as a (level, message) pair instead of printing it."""

    def __init__(self) -> None:
        self._messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self._messages.append(("info", message))

    def success(self, message: str) -> None:
        self._messages.append(("success", message))

    def error(self, message: str) -> None:
        self._messages.append(("error", message))

    @property
    def messages(self) -> list[tuple[str, str]]:
        return self._messages.copy()

    def of_level(self, level: str) -> list[str]:
        return [message for msg_level, message in self._messages if msg_level == level]
