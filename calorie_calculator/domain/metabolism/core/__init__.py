"""Core model of the metabolic estimation domain."""
