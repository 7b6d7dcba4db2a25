"""Gateway client for the R2-backed object store."""
