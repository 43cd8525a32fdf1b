"""
SRP: before

UserManager validates input, stores users and writes the welcome email.
A change to any of the three means editing the same class.
"""


class UserManager:
    def __init__(self):
        self._users = {}
        self.sent_emails = []

    def register(self, name: str, email: str) -> dict:
        # validation
        if not name.strip():
            raise ValueError("Name is required")
        if "@" not in email:
            raise ValueError(f"Invalid email: {email}")
        if email in self._users:
            raise ValueError(f"{email} is already registered")

        # persistence
        self._users[email] = {"name": name, "email": email}

        # presentation and delivery
        body = f"Hello {name},\n\nWelcome aboard!"
        self.sent_emails.append((email, "Welcome", body))
        return self._users[email]

    def find(self, email: str):
        return self._users.get(email)


def demo() -> list[str]:
    manager = UserManager()
    manager.register("Ada", "ada@example.com")
    lines = [f"stored: {manager.find('ada@example.com')}"]
    lines.append(f"emails sent: {len(manager.sent_emails)}")
    try:
        manager.register("Ada", "ada@example.com")
    except ValueError as exc:
        lines.append(f"rejected: {exc}")
    lines.append("reasons to change UserManager: validation, storage, email wording")
    return lines
