"""Source repository access."""
