"""Durable slot storage adapters."""

from .json_file import JsonDirectorySlotStorage
from .memory import MemorySlotStorage

__all__ = ["JsonDirectorySlotStorage", "MemorySlotStorage"]
