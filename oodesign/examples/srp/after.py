"""
SRP: after

One class per reason to change. RegisterUser only coordinates them.
"""

from dataclasses import dataclass
from typing import Optional


class InvalidUserError(ValueError):
    """Raised when a registration request cannot be accepted."""


@dataclass(frozen=True)
class User:
    name: str
    email: str


class UserValidator:
    def validate(self, name: str, email: str) -> None:
        if not name.strip():
            raise InvalidUserError("Name is required")
        if "@" not in email:
            raise InvalidUserError(f"Invalid email: {email}")


class UserRepository:
    def __init__(self):
        self._users = {}

    def add(self, user: User) -> None:
        if user.email in self._users:
            raise InvalidUserError(f"{user.email} is already registered")
        self._users[user.email] = user

    def find(self, email: str) -> Optional[User]:
        return self._users.get(email)


class WelcomeEmail:
    subject = "Welcome"

    def compose(self, user: User) -> tuple[str, str, str]:
        return user.email, self.subject, f"Hello {user.name},\n\nWelcome aboard!"


class Mailbox:
    def __init__(self):
        self.sent = []

    def send(self, address: str, subject: str, body: str) -> None:
        self.sent.append((address, subject, body))


class RegisterUser:
    def __init__(self, validator: UserValidator, repository: UserRepository,
                 email: WelcomeEmail, mailbox: Mailbox):
        self.validator = validator
        self.repository = repository
        self.email = email
        self.mailbox = mailbox

    def __call__(self, name: str, email: str) -> User:
        self.validator.validate(name, email)
        user = User(name, email)
        self.repository.add(user)
        self.mailbox.send(*self.email.compose(user))
        return user


def demo() -> list[str]:
    repository = UserRepository()
    mailbox = Mailbox()
    register = RegisterUser(UserValidator(), repository, WelcomeEmail(), mailbox)

    register("Ada", "ada@example.com")
    lines = [f"stored: {repository.find('ada@example.com')}"]
    lines.append(f"emails sent: {len(mailbox.sent)}")
    try:
        register("Ada", "ada@example.com")
    except InvalidUserError as exc:
        lines.append(f"rejected: {exc}")
    lines.append("each collaborator has a single reason to change")
    return lines
