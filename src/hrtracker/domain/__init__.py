"""Domain layer — temporal value types and the input grammar.

This layer depends only on the stdlib and :mod:`hrtracker.errors`.
It must never import from encoding, infrastructure, services, or commands.
"""
