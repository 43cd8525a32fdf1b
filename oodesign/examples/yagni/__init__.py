"""YAGNI: build what is needed today."""
