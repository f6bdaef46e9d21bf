"""
HTTP API layer: dependencies, error handling and routers.
"""
