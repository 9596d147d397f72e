"""Infrastructure layer — graph adapters for third-party representations.

This layer depends on stdlib and third-party libs (NetworkX).
It must never import from domain, services, or config.
The service layer bridges between domain operations and infrastructure.
"""
