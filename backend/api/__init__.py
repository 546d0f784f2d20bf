"""
PDF Chat gateway API package.

Provides the FastAPI application that fronts the backend session service.
The application itself lives in api.app.
"""
