"""Service layer — model operations wrapped in the ServiceResult contract."""
