"""
Infrastructure layer - persistence, external clients, cache, monitoring.
"""
