"""
Examples Package

One subpackage per principle, each holding a `before` module that exhibits
the violation and an `after` module that resolves it. Every module exposes
`demo()` returning a short transcript of its behavior.
"""
