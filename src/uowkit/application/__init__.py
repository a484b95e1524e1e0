"""Application layer – unit-of-work orchestration."""
