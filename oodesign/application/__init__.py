"""
Application Layer

Use cases: render the handbook, lint handbook documents, run demonstrations.
"""
