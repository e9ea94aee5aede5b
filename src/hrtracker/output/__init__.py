"""Output layer — turns ServiceResult into Rich, quiet, or JSON text."""
