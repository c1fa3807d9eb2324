"""
Infrastructure pieces specific to the trips bounded context.
"""
