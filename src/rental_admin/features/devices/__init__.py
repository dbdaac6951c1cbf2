"""Rentable devices."""
