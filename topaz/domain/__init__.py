"""Domain layer: error model, ports and file filter sets."""
