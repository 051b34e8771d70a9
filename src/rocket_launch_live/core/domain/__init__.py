"""Domain models and query parameters.

Pure data structures (Pydantic v2): no HTTP, no CLI.
"""
