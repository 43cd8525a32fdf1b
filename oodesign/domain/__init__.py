"""
Domain Layer

Principle catalog entries, the markdown document model and lint results.
No dependencies on external frameworks.
"""
