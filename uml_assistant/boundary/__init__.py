"""
Boundary layer: persistence and vector index adapters.
"""
