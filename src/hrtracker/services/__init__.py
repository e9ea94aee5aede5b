"""Service layer — schedule actions returning ServiceResult.

Services may import from domain, encoding, and infrastructure layers.
They must never import from commands or output.
"""
