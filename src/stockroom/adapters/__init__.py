"""Concrete implementations of the interfaces in `stockroom.interfaces`."""
