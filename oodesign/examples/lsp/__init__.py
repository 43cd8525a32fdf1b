"""Liskov Substitution Principle."""
