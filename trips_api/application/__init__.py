"""
Application layer package.

Contains services that orchestrate domain rules over data-access ports.
This layer depends on domain ports, never on infrastructure.
"""
