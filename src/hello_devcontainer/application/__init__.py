"""Application layer: ports and use cases for the greeting report."""
