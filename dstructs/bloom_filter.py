"""Bloom filter: a compact set that can give false positives but never false negatives."""

from __future__ import annotations

from typing import Any, Callable

HashFunc = Callable[[Any], int]

_HASH_MASK = 0xFFFFFFFF

# XORed with a value's hash to derive several independent hashes from one.
# The values are taken from a published table of random digits.
_SALTS = (
    0x1953C322, 0x588CCF17, 0x64BF600C, 0xA6BE3F3D,
    0x341A02EA, 0x15B03217, 0x3B062858, 0x5956FD06,
    0x18B5624F, 0xE3BE0B46, 0x20FFCD5C, 0xA35DFD2B,
    0x1FC4A9BF, 0x57C45D5C, 0xA8661C4A, 0x4F1B74D2,
    0x5A6DDE13, 0x3B18DAC6, 0x05A8AFBF, 0xBBDA2FE2,
    0xA2520D78, 0xE7934849, 0xD541BC75, 0x09A55B57,
    0x9B345AE2, 0xFC2D26AF, 0x38679CEF, 0x81BD1E0D,
    0x654681AE, 0x4B3D87AD, 0xD5FF10FB, 0x23B32F67,
    0xAFC7E366, 0xDD955EAD, 0xE7C34B1C, 0xFEACE0A6,
    0xEB16F09D, 0x3C57A72D, 0x2C8294C5, 0xBA92662A,
    0xCD5B2D14, 0x743936C8, 0x2489BEFF, 0xC6C56E00,
    0x74A4F606, 0xB244A94A, 0x5EDFC423, 0xF1901934,
    0x24AF7691, 0xF6C98B25, 0xEA25AF46, 0x76D5F2E6,
    0x5E33CDF2, 0x445EB357, 0x88556BD2, 0x70D1DA7A,
    0x54449368, 0x381020BC, 0x1C0520BF, 0xF7E44942,
    0xA27E2A58, 0x66866FC5, 0x12519CE7, 0x437A8456,
)

MAX_FUNCTIONS = len(_SALTS)


class BloomFilter:
    """A bit table of ``table_size`` bits probed by ``num_functions`` hashes.

    ``hash_func`` maps a value to an integer; only its low 32 bits are
    used. At most ``MAX_FUNCTIONS`` hash functions may be applied.
    """

    def __init__(self, table_size: int, hash_func: HashFunc, num_functions: int) -> None:
        if table_size <= 0:
            raise ValueError("table_size must be positive")
        if num_functions < 0 or num_functions > MAX_FUNCTIONS:
            raise ValueError(f"num_functions must be between 0 and {MAX_FUNCTIONS}")
        self.table_size = table_size
        self.hash_func = hash_func
        self.num_functions = num_functions
        self._table = bytearray(self._byte_length)

    @property
    def _byte_length(self) -> int:
        return (self.table_size + 7) // 8

    def __repr__(self) -> str:
        return (f"BloomFilter(table_size={self.table_size}, "
                f"num_functions={self.num_functions})")

    def _indexes(self, value: Any):
        hash_value = self.hash_func(value) & _HASH_MASK
        for salt in _SALTS[:self.num_functions]:
            yield (hash_value ^ salt) % self.table_size

    def insert(self, value: Any) -> None:
        """Record ``value`` in the filter."""
        for index in self._indexes(value):
            self._table[index // 8] |= 1 << (index % 8)

    def query(self, value: Any) -> bool:
        """False if ``value`` was definitely never inserted; True if it may have been."""
        return all(self._table[index // 8] & (1 << (index % 8))
                   for index in self._indexes(value))

    def __contains__(self, value: Any) -> bool:
        return self.query(value)

    def read(self) -> bytes:
        """The bit table, packed into ``(table_size + 7) // 8`` bytes."""
        return bytes(self._table)

    def load(self, data: bytes) -> None:
        """Replace the bit table with bytes produced by :meth:`read`.

        Only the first ``(table_size + 7) // 8`` bytes are used; shorter
        data raises ValueError.
        """
        size = self._byte_length
        if len(data) < size:
            raise ValueError(f"expected at least {size} bytes, got {len(data)}")
        self._table[:] = bytes(data[:size])

    def _check_compatible(self, other: BloomFilter) -> None:
        if (self.table_size != other.table_size
                or self.num_functions != other.num_functions
                or self.hash_func != other.hash_func):
            raise ValueError("filters were created with different parameters")

    def _combine(self, other: BloomFilter, op: Callable[[int, int], int]) -> BloomFilter:
        self._check_compatible(other)
        result = BloomFilter(self.table_size, self.hash_func, self.num_functions)
        result._table[:] = bytes(op(a, b) for a, b in zip(self._table, other._table))
        return result

    def union(self, other: BloomFilter) -> BloomFilter:
        """A new filter holding values present in either filter."""
        return self._combine(other, lambda a, b: a | b)

    def intersection(self, other: BloomFilter) -> BloomFilter:
        """A new filter holding only values that may be present in both."""
        return self._combine(other, lambda a, b: a & b)