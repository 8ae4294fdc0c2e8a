"""Bit manipulation helpers.

Bits are numbered little-endian: bit ``i`` lives in byte ``i // 8`` at
position ``i % 8`` counted from the least significant bit. For plain
integers this is simply bit ``i`` of the value.
"""

from __future__ import annotations

_BITS_PER_BYTE = 8


def _check_index(index: int, bit_count: int) -> None:
    if not 0 <= index < bit_count:
        raise IndexError(f"bit index {index} out of range for {bit_count} bits")


def _check_range(start_index: int, end_index: int, bit_count: int) -> None:
    if start_index < 0 or end_index > bit_count:
        raise IndexError(
            f"bit range [{start_index}, {end_index}) out of range for {bit_count} bits"
        )
    if start_index > end_index:
        raise ValueError(f"start index {start_index} is after end index {end_index}")


def _range_mask(start_index: int, end_index: int) -> int:
    return ((1 << (end_index - start_index)) - 1) << start_index


def _write_int(data: bytearray, value: int) -> None:
    data[:] = value.to_bytes(len(data), "little")


def get_bit(data: bytes | bytearray | memoryview, index: int) -> bool:
    """Return bit ``index`` of a byte buffer."""
    _check_index(index, len(data) * _BITS_PER_BYTE)
    return bool(data[index // _BITS_PER_BYTE] >> (index % _BITS_PER_BYTE) & 1)


def set_bit(data: bytearray, index: int, bit: bool) -> None:
    """Set bit ``index`` of a mutable byte buffer to ``bit`` in place."""
    _check_index(index, len(data) * _BITS_PER_BYTE)
    byte_index, offset = divmod(index, _BITS_PER_BYTE)
    if bit:
        data[byte_index] |= 1 << offset
    else:
        data[byte_index] &= ~(1 << offset) & 0xFF


def toggle_bit(data: bytearray, index: int) -> None:
    """Flip bit ``index`` of a mutable byte buffer in place."""
    _check_index(index, len(data) * _BITS_PER_BYTE)
    byte_index, offset = divmod(index, _BITS_PER_BYTE)
    data[byte_index] ^= 1 << offset


def set_line_bits(data: bytearray, start_index: int, end_index: int, bit: bool) -> None:
    """Set every bit in ``[start_index, end_index)`` of the buffer to ``bit``."""
    _check_range(start_index, end_index, len(data) * _BITS_PER_BYTE)
    value = int.from_bytes(data, "little")
    line = _range_mask(start_index, end_index)
    value = value | line if bit else value & ~line
    _write_int(data, value)


def mask(data: bytearray, start_index: int, end_index: int) -> None:
    """Clear every bit of the buffer outside ``[start_index, end_index)``."""
    bit_count = len(data) * _BITS_PER_BYTE
    _check_range(start_index, end_index, bit_count)
    set_line_bits(data, 0, start_index, False)
    set_line_bits(data, end_index, bit_count, False)


def with_bit(value: int, index: int, bit: bool) -> int:
    """Return ``value`` with bit ``index`` set to ``bit``."""
    if index < 0:
        raise IndexError(f"bit index {index} is negative")
    return value | (1 << index) if bit else value & ~(1 << index)


def with_toggled_bit(value: int, index: int) -> int:
    """Return ``value`` with bit ``index`` flipped."""
    if index < 0:
        raise IndexError(f"bit index {index} is negative")
    return value ^ (1 << index)


def _check_value(value: int, width: int) -> None:
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    if not 0 <= value < 1 << width:
        raise ValueError(f"value {value} does not fit in {width} unsigned bits")


def with_line_bits(value: int, start_index: int, end_index: int, bit: bool, width: int) -> int:
    """Return a ``width``-bit value with bits ``[start_index, end_index)`` set to ``bit``."""
    _check_value(value, width)
    _check_range(start_index, end_index, width)
    line = _range_mask(start_index, end_index)
    return value | line if bit else value & ~line


def masked(value: int, start_index: int, end_index: int, width: int) -> int:
    """Return a ``width``-bit value with every bit outside ``[start_index, end_index)`` cleared."""
    _check_value(value, width)
    _check_range(start_index, end_index, width)
    return value & _range_mask(start_index, end_index)