"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) implemented by concrete adapters.
- Dependency inversion: the core depends on abstractions, not on stdin/stdout.
"""
