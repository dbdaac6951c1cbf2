"""User accounts and their granted features."""
