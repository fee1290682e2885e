"""Application use cases invoked by the workflow controller."""
