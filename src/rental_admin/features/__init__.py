"""Feature slices of the rental admin backend."""
