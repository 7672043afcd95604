"""Infrastructure layer — reading declarative documents from disk."""
