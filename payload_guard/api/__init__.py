"""
API layer - FastAPI application, validation dependencies and error handling.
"""
