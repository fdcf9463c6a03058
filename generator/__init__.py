"""Random graph families with negative weights for APSP experiments."""
