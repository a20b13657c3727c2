"""Domain models and entities.

Why:
- Pure, strict data structures (Pydantic v2) live here.
- The domain knows nothing about the CLI or stdin/stdout: only about
  character classes, patterns and specs.
"""
