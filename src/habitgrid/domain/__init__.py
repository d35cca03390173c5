"""Domain-layer interfaces."""
