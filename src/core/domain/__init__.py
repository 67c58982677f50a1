"""Domain models and enums.

Why:
- Pure data structures (Pydantic v2 models, enums) live here.
- The domain knows nothing about files, YAML, processes or the CLI.
"""
