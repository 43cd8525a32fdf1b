"""
DIP: before

The high-level Notifier builds its own low-level SMTP sender. Switching to
SMS, or testing without a mail server, means editing Notifier.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class User:
    name: str
    email: str
    phone: Optional[str] = None


class SmtpEmailSender:
    def __init__(self, host: str = "smtp.example.com"):
        self.host = host
        self.sent = []

    def send_email(self, address: str, subject: str, body: str) -> None:
        self.sent.append((self.host, address, subject, body))


class Notifier:
    def __init__(self):
        self.sender = SmtpEmailSender()

    def notify(self, user: User, text: str) -> None:
        self.sender.send_email(user.email, "Notification", text)


def demo() -> list[str]:
    notifier = Notifier()
    notifier.notify(User("Ada", "ada@example.com", "+15550100"), "Build passed")
    host, address, subject, body = notifier.sender.sent[0]
    return [
        f"sent via {host}: {subject} -> {address}: {body}",
        "Notifier is hard-wired to SmtpEmailSender",
    ]
