"""Open/Closed Principle."""
