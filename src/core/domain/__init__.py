"""Domain models and value objects.

Pure data structures (Pydantic v2 and dataclasses). The domain knows
nothing about HTTP, files or the CLI.
"""
