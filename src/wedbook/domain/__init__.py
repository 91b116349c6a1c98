"""Domain layer — value objects and their validity policies.

This layer depends only on stdlib and pydantic.
It must never import from parsing, config, output, or commands.
"""
