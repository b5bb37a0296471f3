from .bitset import BitSet

__all__ = ["BitSet"]
