"""
Domain layer - entities, value objects, exceptions and interfaces.
"""
