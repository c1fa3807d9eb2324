"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error responses
- Security middleware
- Rate limiting
- Logging configuration
"""
