"""Single Responsibility Principle."""
