"""Application layer: use case services and record/view adapters."""
