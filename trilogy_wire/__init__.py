"""Buffers, packet building and charset tables for the MySQL wire protocol."""

__version__ = "0.1.0"
__all__ = ["buffer", "builder", "charset", "encoding", "encoding_map"]