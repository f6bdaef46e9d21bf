"""
Application layer: services orchestrating core components and persistence.
"""
