"""Checksum discovery building blocks: operations, registry, packet datasets and results."""

__version__ = "0.1.0"
__all__ = ["operations", "registry", "packets", "results"]