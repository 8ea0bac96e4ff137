"""Club schedule website backend and admin panel."""

__version__ = "0.1.0"
