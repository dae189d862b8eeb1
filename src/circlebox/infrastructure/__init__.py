"""Infrastructure layer — JSON envelopes and the contest HTTP client.

This layer depends on stdlib, pydantic, requests and the domain models
it decodes into. It must never import from services, commands, or output.
"""
