"""Domain layer — graph records, the DFS kernel, and reachability rules.

This layer depends only on stdlib.
It must never import from services, infrastructure, or config.
"""
