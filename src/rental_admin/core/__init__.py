"""Core building blocks shared by every rental-admin feature."""
