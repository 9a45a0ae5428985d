"""
Variable-length quantity encoding/decoding.

SMF stores delta-times and meta/sysex payload lengths as variable-length
quantities: 7 bits per byte, most significant group first, with bit 7 set
on every byte except the last.

Encoding scheme:
- Split the value into 7-bit groups
- Emit the groups high to low
- Set bit 7 on all groups but the final one

Example:
    Value:  0x80 (128)
    Groups: 0x01, 0x00
    Output: [0x81, 0x00]
"""

from typing import List, Tuple, Union

from smfbrowser.errors import QuantityOverflow, TruncatedStream

# 9 bytes x 7 bits = 63 bits
MAX_QUANTITY_BYTES = 9
MAX_QUANTITY = (1 << (7 * MAX_QUANTITY_BYTES)) - 1


def decode_varlen(data: Union[bytes, memoryview, List[int]], offset: int = 0) -> Tuple[int, int]:
    """
    Decode one variable-length quantity.

    Args:
        data: Buffer holding the encoded quantity
        offset: Index of the first byte of the quantity

    Returns:
        Tuple of (value, number of bytes consumed)

    Raises:
        TruncatedStream: If the buffer ends before a terminating byte
        QuantityOverflow: If the quantity does not fit in 63 bits

    Example:
        >>> decode_varlen(bytes([0x81, 0x00]))
        (128, 2)
    """
    if isinstance(data, list):
        data = bytes(data)

    value = 0
    position = offset

    while True:
        consumed = position - offset + 1
        if consumed > MAX_QUANTITY_BYTES:
            raise QuantityOverflow(
                f"Variable-length quantity longer than {MAX_QUANTITY_BYTES} bytes", offset
            )

        if position >= len(data):
            raise TruncatedStream(position, needed=1, available=0)

        byte = data[position]
        position += 1
        value = (value << 7) | (byte & 0x7F)

        if not byte & 0x80:
            return value, consumed


def encode_varlen(value: int) -> bytes:
    """
    Encode an integer as a variable-length quantity.

    Args:
        value: Non-negative integer below 2**63

    Returns:
        Encoded bytes, shortest form

    Raises:
        ValueError: If value is negative
        QuantityOverflow: If value needs more than 63 bits

    Example:
        >>> encode_varlen(128)
        b'\\x81\\x00'
    """
    if value < 0:
        raise ValueError(f"Variable-length quantity must be non-negative, got {value}")
    if value > MAX_QUANTITY:
        raise QuantityOverflow(f"Value {value} does not fit in {MAX_QUANTITY_BYTES * 7} bits")

    groups = [value & 0x7F]
    value >>= 7
    while value:
        groups.append((value & 0x7F) | 0x80)
        value >>= 7

    return bytes(reversed(groups))
