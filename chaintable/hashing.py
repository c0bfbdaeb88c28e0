from typing import Callable


HashFn = Callable[[int, int], int]

_FNV_OFFSET = 2166136261
_FNV_PRIME = 16777619
_MASK_32 = 0xFFFFFFFF
_MASK_64 = 0xFFFFFFFFFFFFFFFF


def hash_int(key: int, modulus: int) -> int:
    """FNV-1a over the 8 little-endian bytes of key, reduced to [0, modulus)."""
    hash = _FNV_OFFSET
    for byte in (key & _MASK_64).to_bytes(8, "little"):
        hash ^= byte
        hash = (hash * _FNV_PRIME) & _MASK_32
    return hash % modulus


def hash_identity(key: int, modulus: int) -> int:
    return key % modulus
