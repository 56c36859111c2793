"""Kernel utilities shared across the inbox client.

Rules:
- Kernel code must not import from the conversations or transport packages.
- Kernel utilities should stay small and stable; avoid business logic here.
"""
