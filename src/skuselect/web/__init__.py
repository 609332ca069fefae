"""HTTP adapter for selection queries."""
