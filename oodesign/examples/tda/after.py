"""
Tell-Don't-Ask: after

Each object decides for itself. The caller only tells messages to send.
"""


class User:
    def __init__(self, name: str, email: str, subscribed: bool = True):
        self.name = name
        self._email = email
        self._subscribed = subscribed

    def unsubscribe(self) -> None:
        self._subscribed = False

    def receive(self, body: str, notifier: "Notifier") -> bool:
        """Deliver `body` if this user accepts mail. Returns whether it went out."""
        if not (self._subscribed and self._email):
            return False
        notifier.deliver(self._email, body)
        return True


class Message:
    def __init__(self, recipient: User, body: str):
        self._recipient = recipient
        self._body = body
        self._sent = False

    @property
    def sent(self) -> bool:
        return self._sent

    def send(self, notifier: "Notifier") -> bool:
        if self._sent:
            return False
        self._sent = self._recipient.receive(self._body, notifier)
        return self._sent


class Notifier:
    def __init__(self):
        self.outbox = []

    def deliver(self, address: str, body: str) -> None:
        self.outbox.append((address, body))


def send_pending(messages: list[Message], notifier: Notifier) -> None:
    for message in messages:
        message.send(notifier)


def demo() -> list[str]:
    notifier = Notifier()
    ada = User("Ada", "ada@example.com")
    bob = User("Bob", "bob@example.com")
    bob.unsubscribe()
    messages = [Message(ada, "Welcome"), Message(bob, "Welcome")]

    send_pending(messages, notifier)
    send_pending(messages, notifier)

    lines = [f"delivered {body!r} to {address}" for address, body in notifier.outbox]
    lines.append("send_pending() only tells each message to send itself")
    return lines
