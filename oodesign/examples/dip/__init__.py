"""Dependency Inversion Principle."""
