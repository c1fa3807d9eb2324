"""
Application layer for the trips bounded context.
"""
