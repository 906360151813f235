"""Search results, solution ordering and field value extraction."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from cads.operations import Operation
from cads.packets import PacketDataset

__all__ = [
    "ChecksumSolution",
    "SearchResults",
    "FieldCache",
    "should_continue_search",
    "extract_packet_field_value",
    "mask_checksum_to_size",
    "build_field_cache",
]

_U64 = (1 << 64) - 1


@dataclass(frozen=True)
class ChecksumSolution:
    """A field order, operation sequence and constant that reproduce the checksums."""

    field_indices: tuple[int, ...]
    operations: tuple[Operation, ...]
    constant: int
    checksum_size: int
    validated: bool = False

    @property
    def field_count(self) -> int:
        return len(self.field_indices)

    @property
    def operation_count(self) -> int:
        return len(self.operations)

    def sort_key(self) -> tuple:
        """Key giving a deterministic order: simpler solutions first."""
        return (
            self.field_count,
            self.operation_count,
            tuple(self.field_indices),
            tuple(int(op) for op in self.operations),
            self.constant,
            self.checksum_size,
        )


@dataclass
class SearchResults:
    """Solutions collected by a search, with its bookkeeping."""

    solutions: list[ChecksumSolution] = field(default_factory=list)
    tests_performed: int = 0
    search_completed: bool = False
    early_exit_triggered: bool = False

    @property
    def solution_count(self) -> int:
        return len(self.solutions)

    def add_solution(self, solution: ChecksumSolution) -> None:
        self.solutions.append(solution)

    def sort_solutions(self) -> None:
        """Put the solutions in deterministic order."""
        self.solutions.sort(key=ChecksumSolution.sort_key)


def should_continue_search(results: SearchResults, early_exit: bool, max_solutions: int) -> bool:
    """False once early exit has a solution or the solution limit is reached."""
    if early_exit and results.solution_count > 0:
        return False
    if max_solutions > 0 and results.solution_count >= max_solutions:
        return False
    return True


def extract_packet_field_value(packet_data: bytes, field_index: int, checksum_size: int) -> int:
    """Big-endian value of ``max(checksum_size, 1)`` bytes starting at ``field_index``.

    Bytes past the end of the packet are not read; an index past the end yields 0.
    """
    if field_index < 0 or field_index >= len(packet_data):
        return 0
    width = max(checksum_size, 1)
    value = 0
    for byte in packet_data[field_index:field_index + width]:
        value = ((value << 8) | byte) & _U64
    return value


def mask_checksum_to_size(checksum: int, checksum_size: int) -> int:
    """Keep only the low ``checksum_size`` bytes of ``checksum``."""
    if checksum_size >= 8:
        return checksum & _U64
    return checksum & ((1 << (checksum_size * 8)) - 1)


@dataclass(frozen=True)
class FieldCache:
    """Precomputed field values indexed by packet and field position."""

    values: tuple[tuple[int, ...], ...]
    checksum_size: int
    field_count: int

    def value(self, packet_index: int, field_index: int) -> int:
        if not 0 <= field_index < self.field_count:
            raise IndexError(f"field index {field_index} out of range")
        if not 0 <= packet_index < len(self.values):
            raise IndexError(f"packet index {packet_index} out of range")
        return self.values[packet_index][field_index]


def build_field_cache(
    dataset: PacketDataset | Sequence, checksum_size: int, max_fields: int
) -> FieldCache:
    """Precompute field values for every packet, up to the shortest packet length.

    Raises ValueError for an empty dataset.
    """
    packets = list(dataset)
    if not packets:
        raise ValueError("cannot build a field cache for an empty dataset")
    field_count = min(max_fields, min(len(packet.data) for packet in packets))
    values = tuple(
        tuple(
            extract_packet_field_value(packet.data, index, checksum_size)
            for index in range(field_count)
        )
        for packet in packets
    )
    return FieldCache(values=values, checksum_size=checksum_size, field_count=field_count)