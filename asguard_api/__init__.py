"""AsGuard HTTP layer.

Provides the FastAPI application factory, the guard error-translation
middleware, typed settings, and structured logging for services that raise
``asguard`` errors from their handlers.
"""
