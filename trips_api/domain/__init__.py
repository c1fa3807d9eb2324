"""
Domain layer package.

Contains the error taxonomy, entity rules and port interfaces.
This layer has ZERO external dependencies.
No framework imports, no IO, no side effects.
"""
