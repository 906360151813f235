"""Registry of every checksum operation with its metadata and cost weight."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from cads.operations import (
    Complexity,
    Operation,
    advanced_checksum_variant,
    advanced_crc8_ccitt,
    advanced_crc8_dallas,
    advanced_crc8_sae,
    advanced_fletcher8,
    advanced_lookup_table,
    advanced_poly_crc,
    advanced_reverse_bits,
    advanced_rotleft,
    advanced_rotright,
    advanced_swap_nibbles,
    basic_add,
    basic_and,
    basic_identity,
    basic_or,
    basic_sub,
    basic_xor,
    intermediate_const_add,
    intermediate_const_sub,
    intermediate_const_xor,
    intermediate_div,
    intermediate_lshift,
    intermediate_mod,
    intermediate_mul,
    intermediate_negate,
    intermediate_not,
    intermediate_ones_complement,
    intermediate_rshift,
    intermediate_twos_complement,
)

__all__ = [
    "AlgorithmEntry",
    "ComplexityStats",
    "get_all_algorithms",
    "get_algorithms_by_complexity",
    "get_algorithm_by_operation",
    "get_complexity_name",
    "get_complexity_stats",
    "execute_algorithm",
    "estimate_total_combinations",
    "estimate_completion_time",
    "profile_algorithm_performance",
]

_U64 = (1 << 64) - 1

OperationFunc = Callable[[int, int, int], int]


@dataclass(frozen=True)
class AlgorithmEntry:
    """One operation together with its descriptive metadata."""

    op: Operation
    complexity: Complexity
    name: str
    description: str
    requires_constant: bool
    func: OperationFunc
    computational_weight: int


@dataclass(frozen=True)
class ComplexityStats:
    """Typical throughput figures for a complexity tier."""

    level: Complexity
    name: str
    algorithm_count: int
    avg_ops_per_second: float
    description: str


_COMPLEXITY_STATS: tuple[ComplexityStats, ...] = (
    ComplexityStats(Complexity.BASIC, "Basic", 6, 500000.0,
                    "Simple arithmetic and logical operations"),
    ComplexityStats(Complexity.INTERMEDIATE, "Intermediate", 12, 100000.0,
                    "Bit manipulation and constant operations"),
    ComplexityStats(Complexity.ADVANCED, "Advanced", 11, 5000.0,
                    "CRC variants and complex algorithms"),
    ComplexityStats(Complexity.ALL, "All", 29, 50000.0,
                    "Complete algorithm suite"),
)

_B = Complexity.BASIC
_I = Complexity.INTERMEDIATE
_A = Complexity.ADVANCED

_REGISTRY: tuple[AlgorithmEntry, ...] = (
    AlgorithmEntry(Operation.ADD, _B, "ADD", "Simple addition", False, basic_add, 1),
    AlgorithmEntry(Operation.SUB, _B, "SUB", "Subtraction", False, basic_sub, 1),
    AlgorithmEntry(Operation.XOR, _B, "XOR", "Exclusive OR", False, basic_xor, 1),
    AlgorithmEntry(Operation.AND, _B, "AND", "Bitwise AND", False, basic_and, 1),
    AlgorithmEntry(Operation.OR, _B, "OR", "Bitwise OR", False, basic_or, 1),
    AlgorithmEntry(Operation.IDENTITY, _B, "ID", "Pass-through", False, basic_identity, 1),
    AlgorithmEntry(Operation.NOT, _I, "NOT", "Bitwise NOT", False, intermediate_not, 1),
    AlgorithmEntry(Operation.LSHIFT, _I, "LSH", "Left shift", False, intermediate_lshift, 1),
    AlgorithmEntry(Operation.RSHIFT, _I, "RSH", "Right shift", False, intermediate_rshift, 1),
    AlgorithmEntry(Operation.MUL, _I, "MUL", "Multiplication", False, intermediate_mul, 3),
    AlgorithmEntry(Operation.DIV, _I, "DIV", "Division", False, intermediate_div, 2),
    AlgorithmEntry(Operation.MOD, _I, "MOD", "Modulo", False, intermediate_mod, 2),
    AlgorithmEntry(Operation.NEGATE, _I, "NEG", "Two's complement negation", False,
                   intermediate_negate, 1),
    AlgorithmEntry(Operation.CONST_ADD, _I, "C+", "Add constant", True,
                   intermediate_const_add, 1),
    AlgorithmEntry(Operation.CONST_XOR, _I, "C^", "XOR with constant", True,
                   intermediate_const_xor, 1),
    AlgorithmEntry(Operation.CONST_SUB, _I, "C-", "Subtract constant", True,
                   intermediate_const_sub, 1),
    AlgorithmEntry(Operation.ONES_COMPLEMENT, _I, "1COMP", "One's complement sum", False,
                   intermediate_ones_complement, 1),
    AlgorithmEntry(Operation.TWOS_COMPLEMENT, _I, "2COMP", "Two's complement sum", False,
                   intermediate_twos_complement, 2),
    AlgorithmEntry(Operation.ROTLEFT, _A, "ROTL", "Rotate left", False, advanced_rotleft, 2),
    AlgorithmEntry(Operation.ROTRIGHT, _A, "ROTR", "Rotate right", False, advanced_rotright, 2),
    AlgorithmEntry(Operation.CRC8_CCITT, _A, "CRC8C", "CRC-8 CCITT", False,
                   advanced_crc8_ccitt, 8),
    AlgorithmEntry(Operation.CRC8_DALLAS, _A, "CRC8D", "CRC-8 Dallas/Maxim", False,
                   advanced_crc8_dallas, 8),
    AlgorithmEntry(Operation.CRC8_SAE, _A, "CRC8S", "CRC-8 SAE J1850", False,
                   advanced_crc8_sae, 8),
    AlgorithmEntry(Operation.FLETCHER8, _A, "FLETCH", "Fletcher-8 checksum", False,
                   advanced_fletcher8, 6),
    AlgorithmEntry(Operation.SWAP_NIBBLES, _A, "SWAP", "Swap nibbles", False,
                   advanced_swap_nibbles, 2),
    AlgorithmEntry(Operation.REVERSE_BITS, _A, "REVB", "Reverse bits", False,
                   advanced_reverse_bits, 8),
    AlgorithmEntry(Operation.LOOKUP_TABLE, _A, "LUT", "Lookup table", False,
                   advanced_lookup_table, 3),
    AlgorithmEntry(Operation.POLY_CRC, _A, "PCRC", "Polynomial CRC", True,
                   advanced_poly_crc, 20),
    AlgorithmEntry(Operation.CHECKSUM_VARIANT, _A, "CVAR", "Checksum variant", True,
                   advanced_checksum_variant, 5),
)

_BY_OPERATION: dict[int, AlgorithmEntry] = {int(entry.op): entry for entry in _REGISTRY}


def get_all_algorithms() -> tuple[AlgorithmEntry, ...]:
    """Every registered operation, in registry order."""
    return _REGISTRY


def get_algorithms_by_complexity(complexity: int) -> tuple[AlgorithmEntry, ...]:
    """Operations at or below ``complexity``; ``Complexity.ALL`` returns all."""
    if complexity == Complexity.ALL:
        return _REGISTRY
    return tuple(entry for entry in _REGISTRY if entry.complexity <= complexity)


def get_algorithm_by_operation(op: int) -> AlgorithmEntry | None:
    """The registry entry for ``op``, or ``None`` if it is not registered."""
    return _BY_OPERATION.get(int(op))


def get_complexity_name(complexity: int) -> str:
    """Human-readable name of a complexity tier."""
    try:
        level = Complexity(complexity)
    except ValueError:
        return "Unknown"
    return {
        Complexity.BASIC: "Basic",
        Complexity.INTERMEDIATE: "Intermediate",
        Complexity.ADVANCED: "Advanced",
        Complexity.ALL: "All",
    }[level]


def get_complexity_stats() -> tuple[ComplexityStats, ...]:
    """Throughput statistics for each complexity tier."""
    return _COMPLEXITY_STATS


def execute_algorithm(op: int, a: int, b: int, constant: int) -> int:
    """Apply operation ``op``; unknown operations yield 0."""
    entry = get_algorithm_by_operation(op)
    if entry is None:
        return 0
    return entry.func(a, b, constant)


def estimate_total_combinations(
    complexity: int, max_fields: int, max_constants: int, packet_count: int
) -> int:
    """Rough size of the search space for the given parameters."""
    if packet_count == 0:
        return 0
    algorithm_count = len(get_algorithms_by_complexity(complexity))
    field_combinations = 1 + sum(
        packet_count * fields * 2 for fields in range(1, max_fields + 1)
    )
    return (field_combinations * algorithm_count * max_constants) & _U64


def estimate_completion_time(
    complexity: int, max_fields: int, max_constants: int, packet_count: int
) -> float:
    """Estimated search time in seconds, from the tier's typical throughput."""
    total = estimate_total_combinations(complexity, max_fields, max_constants, packet_count)
    rate = next(
        (stats.avg_ops_per_second for stats in _COMPLEXITY_STATS if stats.level == complexity),
        50000.0,
    )
    return total / rate


def profile_algorithm_performance(iterations: int = 10000) -> dict[Operation, float]:
    """Time every operation and report its throughput in operations per second."""
    print("🔬 Profiling algorithm performance...")
    test_values = (0x12345678, 0xABCDEF00, 0x55AA55AA, 0xFF00FF00)
    pairs = list(zip(test_values, test_values[1:] + test_values[:1]))
    rates: dict[Operation, float] = {}

    for entry in _REGISTRY:
        result = 0
        start = time.perf_counter()
        for _ in range(iterations):
            for a, b in pairs:
                result = (result + execute_algorithm(entry.op, a, b, 0xD0)) & _U64
        elapsed = time.perf_counter() - start
        calls = iterations * len(pairs)
        rate = calls / elapsed if elapsed > 0 else float("inf")
        rates[entry.op] = rate
        print(
            f"   {entry.description}: {rate / 1_000_000:.2f} M ops/sec "
            f"(weight: {entry.computational_weight}, result: {result})"
        )
    print()
    return rates