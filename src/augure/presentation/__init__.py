"""
Presentation layer - FastAPI routes, schemas, middleware.
"""
