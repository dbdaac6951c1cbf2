"""Rental Admin - administrative backend for rental devices, customer orders,
financial expenses and user accounts.

The authorization core lives in ``rental_admin.features.authorization``.
"""

from .__version__ import __version__

__all__ = ["__version__"]
