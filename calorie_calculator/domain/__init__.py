"""Domain layer: unit normalization and metabolic estimation."""
