"""Concrete collaborator implementations."""

from clibro.drivers.bus import LocalBusConnection

__all__ = ["LocalBusConnection"]
