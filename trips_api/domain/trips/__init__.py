"""
Trips bounded context — domain layer.
"""
