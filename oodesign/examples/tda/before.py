"""
Tell-Don't-Ask: before

The caller asks a message and its recipient for their state, then makes the
delivery decision on their behalf.
"""


class User:
    def __init__(self, name: str, email: str, subscribed: bool = True):
        self.name = name
        self.email = email
        self.subscribed = subscribed


class Message:
    def __init__(self, recipient: User, body: str):
        self.recipient = recipient
        self.body = body
        self.sent = False


class Notifier:
    def __init__(self):
        self.outbox = []

    def deliver(self, address: str, body: str) -> None:
        self.outbox.append((address, body))


def send_pending(messages: list[Message], notifier: Notifier) -> None:
    # Every caller has to repeat these checks
    for message in messages:
        if message.sent:
            continue
        if not message.recipient.subscribed or not message.recipient.email:
            continue
        notifier.deliver(message.recipient.email, message.body)
        message.sent = True


def demo() -> list[str]:
    notifier = Notifier()
    ada = User("Ada", "ada@example.com")
    bob = User("Bob", "bob@example.com", subscribed=False)
    messages = [Message(ada, "Welcome"), Message(bob, "Welcome")]

    send_pending(messages, notifier)
    send_pending(messages, notifier)

    lines = [f"delivered {body!r} to {address}" for address, body in notifier.outbox]
    lines.append("send_pending() read 3 attributes per message to decide")
    return lines
