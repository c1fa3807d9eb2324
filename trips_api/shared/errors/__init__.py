"""
Shared error handling package.

Centralizes error-to-HTTP rendering so that every forwarded
AppError is turned into the same response shape.
"""
