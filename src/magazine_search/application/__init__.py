"""Application layer: corpus queries, formatting, widgets."""
