"""Domain layer: resource kinds and the error hierarchy."""
