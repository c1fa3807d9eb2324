"""
Interfaces layer package.

Contains FastAPI routers, request handlers and Pydantic response schemas.
No business logic belongs here.
"""
