import pytest

from cads.operations import Operation
from cads.packets import PacketDataset
from cads.results import (
    ChecksumSolution,
    SearchResults,
    build_field_cache,
    extract_packet_field_value,
    mask_checksum_to_size,
    should_continue_search,
)


def _solution(fields, ops, constant=0, size=1):
    return ChecksumSolution(tuple(fields), tuple(ops), constant, size, True)


def test_search_results_validation():
    results = SearchResults()
    assert results.solution_count == 0
    assert not results.search_completed
    assert not results.early_exit_triggered

    results.add_solution(
        ChecksumSolution((2, 5), (Operation.XOR,), 0x42, 1, True)
    )
    assert results.solution_count == 1
    stored = results.solutions[0]
    assert stored.field_indices[0] == 2
    assert stored.field_indices[1] == 5
    assert stored.field_count == 2
    assert stored.operations[0] == Operation.XOR
    assert stored.constant == 0x42
    assert stored.validated


def test_early_exit_conditions():
    results = SearchResults()
    assert should_continue_search(results, True, 0)
    results.add_solution(_solution([0], [Operation.ADD]))
    assert not should_continue_search(results, True, 0)

    results = SearchResults()
    for index in range(2):
        results.add_solution(_solution([index], [Operation.ADD]))
    assert should_continue_search(results, False, 3)
    results.add_solution(_solution([5], [Operation.ADD]))
    assert not should_continue_search(results, False, 3)


def test_sort_solutions_orders_simplest_first():
    results = SearchResults()
    a = _solution([1, 2], [Operation.ADD, Operation.XOR], 5)
    b = _solution([3], [Operation.XOR, Operation.ADD], 1)
    c = _solution([1, 2], [Operation.ADD, Operation.XOR], 3)
    d = _solution([0, 2], [Operation.XOR], 9)
    e = _solution([0, 2], [Operation.XOR, Operation.ADD], 0)
    for item in (a, b, c, d, e):
        results.add_solution(item)
    results.sort_solutions()
    assert results.solutions == [b, d, e, c, a]


def test_extract_packet_field_value():
    data = b"\x9c\x30\x01"
    assert extract_packet_field_value(data, 0, 1) == 0x9C
    assert extract_packet_field_value(data, 0, 0) == 0x9C
    assert extract_packet_field_value(data, 1, 2) == 0x3001
    assert extract_packet_field_value(data, 2, 2) == 0x01
    assert extract_packet_field_value(data, 3, 1) == 0


def test_mask_checksum_to_size():
    assert mask_checksum_to_size(0x1234, 1) == 0x34
    assert mask_checksum_to_size(0x123456, 2) == 0x3456
    assert mask_checksum_to_size(0x1234, 8) == 0x1234
    assert mask_checksum_to_size(0x1234, 0) == 0


def test_build_field_cache():
    dataset = PacketDataset()
    dataset.add_bytes([0x01, 0x02, 0x03], 0, 1, "a")
    dataset.add_bytes([0x10, 0x20, 0x30, 0x40], 0, 1, "b")
    cache = build_field_cache(dataset, 2, 10)
    assert cache.field_count == 3
    assert cache.value(0, 0) == 0x0102
    assert cache.value(0, 2) == 0x03
    assert cache.value(1, 2) == 0x3040
    with pytest.raises(IndexError):
        cache.value(0, 3)


def test_build_field_cache_empty():
    with pytest.raises(ValueError):
        build_field_cache(PacketDataset(), 1, 4)