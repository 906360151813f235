"""Primitive checksum operations and their classification.

Every operation takes ``(a, b, constant)`` and returns an unsigned 64-bit
result.  Operations that do not use one of the arguments simply ignore it,
so they can be combined freely when searching for a checksum algorithm.
"""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "Operation",
    "Complexity",
    "CRC8_CCITT_TABLE",
    "SAMPLE_LOOKUP_TABLE",
    "rotate_left",
    "rotate_right",
    "reverse_bits",
    "basic_add",
    "basic_sub",
    "basic_xor",
    "basic_and",
    "basic_or",
    "basic_identity",
    "intermediate_not",
    "intermediate_lshift",
    "intermediate_rshift",
    "intermediate_mul",
    "intermediate_div",
    "intermediate_mod",
    "intermediate_negate",
    "intermediate_const_add",
    "intermediate_const_xor",
    "intermediate_const_sub",
    "intermediate_ones_complement",
    "intermediate_twos_complement",
    "advanced_rotleft",
    "advanced_rotright",
    "advanced_crc8_ccitt",
    "advanced_crc8_dallas",
    "advanced_crc8_sae",
    "advanced_fletcher8",
    "advanced_swap_nibbles",
    "advanced_reverse_bits",
    "advanced_lookup_table",
    "advanced_poly_crc",
    "advanced_checksum_variant",
]

_U64 = (1 << 64) - 1


class Operation(IntEnum):
    """Identifiers for every primitive operation."""

    ADD = 0
    SUB = 1
    XOR = 2
    AND = 3
    OR = 4
    IDENTITY = 5
    NOT = 6
    LSHIFT = 7
    RSHIFT = 8
    MUL = 9
    DIV = 10
    MOD = 11
    NEGATE = 12
    CONST_ADD = 13
    CONST_XOR = 14
    CONST_SUB = 15
    ONES_COMPLEMENT = 16
    TWOS_COMPLEMENT = 17
    ROTLEFT = 18
    ROTRIGHT = 19
    CRC8_CCITT = 20
    CRC8_DALLAS = 21
    CRC8_SAE = 22
    FLETCHER8 = 23
    SWAP_NIBBLES = 24
    REVERSE_BITS = 25
    LOOKUP_TABLE = 26
    POLY_CRC = 27
    CHECKSUM_VARIANT = 28


class Complexity(IntEnum):
    """Complexity tiers; a tier includes every lower tier."""

    BASIC = 0
    INTERMEDIATE = 1
    ADVANCED = 2
    ALL = 3


def _crc8_table(poly: int) -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte
        for _ in range(8):
            crc = ((crc << 1) ^ poly) if crc & 0x80 else (crc << 1)
            crc &= 0xFF
        table.append(crc)
    return tuple(table)


CRC8_CCITT_TABLE: tuple[int, ...] = _crc8_table(0x07)
"""CRC-8 lookup table for polynomial 0x07."""

SAMPLE_LOOKUP_TABLE: tuple[int, ...] = tuple((i + 0x31) & 0xFF for i in range(256))
"""Sample substitution table used by the lookup-table operation."""


def _normalise_width(bit_width: int) -> int:
    return 64 if bit_width <= 0 or bit_width > 64 else bit_width


def rotate_left(value: int, positions: int, bit_width: int) -> int:
    """Rotate ``value`` left within ``bit_width`` bits (0 or >64 means 64)."""
    width = _normalise_width(bit_width)
    shift = (positions & 0xFF) % width
    mask = (1 << width) - 1
    value &= mask
    return ((value << shift) | (value >> (width - shift))) & mask


def rotate_right(value: int, positions: int, bit_width: int) -> int:
    """Rotate ``value`` right within ``bit_width`` bits (0 or >64 means 64)."""
    width = _normalise_width(bit_width)
    shift = (positions & 0xFF) % width
    mask = (1 << width) - 1
    value &= mask
    return ((value >> shift) | (value << (width - shift))) & mask


def reverse_bits(value: int, bit_width: int) -> int:
    """Reverse the low ``bit_width`` bits of ``value``."""
    width = _normalise_width(bit_width)
    result = 0
    for i in range(width):
        result = (result << 1) | ((value >> i) & 1)
    return result


# Basic operations

def basic_add(a: int, b: int, constant: int) -> int:
    return (a + b) & _U64


def basic_sub(a: int, b: int, constant: int) -> int:
    return (a - b) & _U64


def basic_xor(a: int, b: int, constant: int) -> int:
    return (a ^ b) & _U64


def basic_and(a: int, b: int, constant: int) -> int:
    return (a & b) & _U64


def basic_or(a: int, b: int, constant: int) -> int:
    return (a | b) & _U64


def basic_identity(a: int, b: int, constant: int) -> int:
    return a & _U64


# Intermediate operations

def intermediate_not(a: int, b: int, constant: int) -> int:
    return ~a & _U64


def intermediate_lshift(a: int, b: int, constant: int) -> int:
    return ((a & _U64) << (b & 0x3F)) & _U64


def intermediate_rshift(a: int, b: int, constant: int) -> int:
    return (a & _U64) >> (b & 0x3F)


def intermediate_mul(a: int, b: int, constant: int) -> int:
    b &= _U64
    return ((a & _U64) * (b or 1)) & _U64


def intermediate_div(a: int, b: int, constant: int) -> int:
    b &= _U64
    return (a & _U64) // b if b else 0


def intermediate_mod(a: int, b: int, constant: int) -> int:
    b &= _U64
    return (a & _U64) % b if b else 0


def intermediate_negate(a: int, b: int, constant: int) -> int:
    return -a & _U64


def intermediate_const_add(a: int, b: int, constant: int) -> int:
    return (a + constant) & _U64


def intermediate_const_xor(a: int, b: int, constant: int) -> int:
    return (a ^ constant) & _U64


def intermediate_const_sub(a: int, b: int, constant: int) -> int:
    return (a - constant) & _U64


def intermediate_ones_complement(a: int, b: int, constant: int) -> int:
    return ~(a + b) & _U64


def intermediate_twos_complement(a: int, b: int, constant: int) -> int:
    return -(a + b) & _U64


# Advanced operations

def advanced_rotleft(a: int, b: int, constant: int) -> int:
    """Rotate the low byte of ``a`` left by ``b`` positions."""
    return rotate_left(a, b & 0x3F, 8)


def advanced_rotright(a: int, b: int, constant: int) -> int:
    """Rotate the low byte of ``a`` right by ``b`` positions."""
    return rotate_right(a, b & 0x3F, 8)


def advanced_crc8_ccitt(a: int, b: int, constant: int) -> int:
    return CRC8_CCITT_TABLE[(a ^ b) & 0xFF]


def advanced_crc8_dallas(a: int, b: int, constant: int) -> int:
    """Dallas/Maxim 1-Wire style CRC-8 over the byte ``a ^ b``."""
    crc = 0
    data = (a ^ b) & 0xFF
    for _ in range(8):
        if (crc ^ data) & 0x01:
            crc = ((crc ^ 0x18) >> 1) | 0x80
        else:
            crc >>= 1
        data >>= 1
    return crc


def advanced_crc8_sae(a: int, b: int, constant: int) -> int:
    """SAE J1850 CRC-8 over the byte ``a ^ b``."""
    crc = 0xFF ^ ((a ^ b) & 0xFF)
    for _ in range(8):
        crc = ((crc << 1) ^ 0x1D) if crc & 0x80 else (crc << 1)
        crc &= 0xFF
    return crc


def advanced_fletcher8(a: int, b: int, constant: int) -> int:
    sum1 = a & 0xFF
    sum2 = b & 0xFF
    sum1 = (sum1 + sum2) & 0xFF
    sum2 = (sum2 + sum1) & 0xFF
    return sum2


def advanced_swap_nibbles(a: int, b: int, constant: int) -> int:
    return ((a & 0x0F) << 4) | ((a & 0xF0) >> 4)


def advanced_reverse_bits(a: int, b: int, constant: int) -> int:
    return reverse_bits(a, 8)


def advanced_lookup_table(a: int, b: int, constant: int) -> int:
    return SAMPLE_LOOKUP_TABLE[a & 0xFF]


def advanced_poly_crc(a: int, b: int, constant: int) -> int:
    """Reflected CRC step with the low byte of ``constant`` as polynomial."""
    crc = a & 0xFF
    data = b & 0xFF
    poly = constant & 0xFF
    for _ in range(8):
        if (crc ^ data) & 0x01:
            crc = (crc >> 1) ^ poly
        else:
            crc >>= 1
        data >>= 1
    return crc


def advanced_checksum_variant(a: int, b: int, constant: int) -> int:
    """One of four combinations of ``a`` and ``b``, chosen by ``constant & 3``."""
    selector = constant & 0x3
    if selector == 0:
        result = a + b + constant
    elif selector == 1:
        result = a ^ b ^ constant
    elif selector == 2:
        result = a * b + constant
    else:
        result = (((a & _U64) << 1) & _U64) + b + constant
    return result & _U64