"""License classification and dependency resolution."""
