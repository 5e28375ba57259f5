"""Application layer - roster reconciliation use cases."""
