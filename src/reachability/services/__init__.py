"""Service layer — reachability queries returning ServiceResult.

Services may import from domain, infrastructure, and config.
"""
