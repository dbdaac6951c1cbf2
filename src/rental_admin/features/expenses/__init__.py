"""Business financial expenses."""
