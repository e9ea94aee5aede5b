"""Infrastructure layer — schedule records on disk and the schedule directory.

This layer may import from domain and encoding.
It must never import from services, commands, or output.
"""
