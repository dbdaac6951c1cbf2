"""Customer rental orders."""
