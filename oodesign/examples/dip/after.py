"""
DIP: after

Notifier and the delivery mechanisms both depend on the MessageChannel
abstraction. The concrete channel is handed in from outside.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class User:
    name: str
    email: str
    phone: Optional[str] = None


class MessageChannel(ABC):
    @abstractmethod
    def deliver(self, user: User, text: str) -> None:
        """Send `text` to `user` over this channel."""


class EmailChannel(MessageChannel):
    def __init__(self, host: str = "smtp.example.com"):
        self.host = host
        self.sent = []

    def deliver(self, user: User, text: str) -> None:
        self.sent.append((user.email, "Notification", text))


class SmsChannel(MessageChannel):
    def __init__(self):
        self.sent = []

    def deliver(self, user: User, text: str) -> None:
        if not user.phone:
            raise ValueError(f"{user.name} has no phone number")
        self.sent.append((user.phone, text))


class InMemoryChannel(MessageChannel):
    def __init__(self):
        self.messages = []

    def deliver(self, user: User, text: str) -> None:
        self.messages.append((user.name, text))


class Notifier:
    def __init__(self, channel: MessageChannel):
        self._channel = channel

    def notify(self, user: User, text: str) -> None:
        self._channel.deliver(user, text)


def demo() -> list[str]:
    ada = User("Ada", "ada@example.com", "+15550100")
    lines = []
    for channel in (EmailChannel(), SmsChannel(), InMemoryChannel()):
        Notifier(channel).notify(ada, "Build passed")
        lines.append(f"{type(channel).__name__}: {vars(channel)}")
    return lines
