"""
API layer - FastAPI app, routes and dependency providers
"""
