import pytest

from cads.operations import Complexity, Operation
from cads.registry import (
    AlgorithmEntry,
    estimate_completion_time,
    estimate_total_combinations,
    execute_algorithm,
    get_algorithm_by_operation,
    get_algorithms_by_complexity,
    get_all_algorithms,
    get_complexity_name,
    get_complexity_stats,
    profile_algorithm_performance,
)


def _forj(packet):
    result = packet[5]
    temp = execute_algorithm(Operation.ADD, result, packet[4], 0)
    result = execute_algorithm(Operation.ONES_COMPLEMENT, temp, 0, 0)
    result = execute_algorithm(Operation.CONST_ADD, result, 0, 0xD0)
    result = execute_algorithm(Operation.XOR, result, packet[3], 0)
    result = execute_algorithm(Operation.XOR, result, packet[2], 0)
    result = execute_algorithm(Operation.ONES_COMPLEMENT, result, 0, 0)
    return result & 0xFF


def test_add_operation():
    assert execute_algorithm(Operation.ADD, 0x30, 0x01, 0) & 0xFF == 0x31


def test_xor_operation():
    assert execute_algorithm(Operation.XOR, 0x30, 0x01, 0) & 0xFF == 0x31


def test_identity_operation():
    assert execute_algorithm(Operation.IDENTITY, 0x30, 0x01, 0) & 0xFF == 0x30


def test_ones_complement_operation():
    assert execute_algorithm(Operation.ONES_COMPLEMENT, 0x30, 0x01, 0) & 0xFF == 0xCE


def test_const_add_operation():
    assert execute_algorithm(Operation.CONST_ADD, 0xFF, 0x00, 0xD0) & 0xFF == 0xCF


def test_registry_entry_has_function():
    entry = get_algorithm_by_operation(Operation.ADD)
    assert isinstance(entry, AlgorithmEntry)
    assert entry.func(2, 3, 0) == 5


def test_invalid_operation_returns_zero():
    assert execute_algorithm(999, 0x30, 0x01, 0) == 0
    assert get_algorithm_by_operation(999) is None


def test_operation_metadata():
    entry = get_algorithm_by_operation(Operation.CONST_ADD)
    assert entry.name == "C+"
    assert entry.requires_constant is True
    entry = get_algorithm_by_operation(Operation.ADD)
    assert entry.name == "ADD"
    assert entry.requires_constant is False


def test_advanced_operations_wired():
    assert execute_algorithm(Operation.SWAP_NIBBLES, 0xAB, 0, 0) & 0xFF == 0xBA
    assert execute_algorithm(Operation.REVERSE_BITS, 0x96, 0, 0) & 0xFF == 0x69
    crc_ccitt = execute_algorithm(Operation.CRC8_CCITT, 0xAA, 0x55, 0) & 0xFF
    crc_dallas = execute_algorithm(Operation.CRC8_DALLAS, 0xAA, 0x55, 0) & 0xFF
    assert crc_ccitt != 0x00
    assert crc_ccitt != crc_dallas
    assert execute_algorithm(Operation.ROTLEFT, 0x81, 0x01, 0) & 0xFF == 0x03
    assert execute_algorithm(Operation.ROTRIGHT, 0x81, 0x01, 0) & 0xFF == 0xC0


def test_forj_algorithm_sequence():
    packet = [0x9C, 0x30, 0x01, 0x00, 0x00, 0x00, 0x00, 0x00]
    result = packet[5]
    temp = execute_algorithm(Operation.ADD, result, packet[4], 0)
    assert temp & 0xFF == 0x00
    result = execute_algorithm(Operation.ONES_COMPLEMENT, temp, 0, 0)
    assert result & 0xFF == 0xFF
    result = execute_algorithm(Operation.CONST_ADD, result, 0, 0xD0)
    assert result & 0xFF == 0xCF
    result = execute_algorithm(Operation.XOR, result, packet[3], 0)
    assert result & 0xFF == 0xCF
    result = execute_algorithm(Operation.XOR, result, packet[2], 0)
    assert result & 0xFF == 0xCE
    result = execute_algorithm(Operation.ONES_COMPLEMENT, result, 0, 0)
    assert result & 0xFF == 0x31


@pytest.mark.parametrize(
    "packet, expected",
    [
        ([0x00] * 8, 0x30),
        ([0xFF] * 8, 0x2E),
        ([0x9C, 0x30, 0x01, 0x00, 0x00, 0x00, 0x00, 0x00], 0x31),
    ],
)
def test_forj_algorithm_edge_cases(packet, expected):
    assert _forj(packet) == expected


def test_all_algorithms_count_and_order():
    entries = get_all_algorithms()
    assert len(entries) == 29
    assert entries[0].op == Operation.ADD
    assert entries[-1].op == Operation.CHECKSUM_VARIANT
    assert {entry.op for entry in entries} == set(Operation)


@pytest.mark.parametrize(
    "complexity, count",
    [
        (Complexity.BASIC, 6),
        (Complexity.INTERMEDIATE, 18),
        (Complexity.ADVANCED, 29),
        (Complexity.ALL, 29),
    ],
)
def test_algorithms_by_complexity(complexity, count):
    entries = get_algorithms_by_complexity(complexity)
    assert len(entries) == count
    if complexity != Complexity.ALL:
        assert all(entry.complexity <= complexity for entry in entries)


def test_computational_weights():
    assert get_algorithm_by_operation(Operation.POLY_CRC).computational_weight == 20
    assert get_algorithm_by_operation(Operation.MUL).computational_weight == 3
    assert get_algorithm_by_operation(Operation.TWOS_COMPLEMENT).computational_weight == 2


@pytest.mark.parametrize(
    "complexity, name",
    [
        (Complexity.BASIC, "Basic"),
        (Complexity.INTERMEDIATE, "Intermediate"),
        (Complexity.ADVANCED, "Advanced"),
        (Complexity.ALL, "All"),
        (42, "Unknown"),
    ],
)
def test_complexity_name(complexity, name):
    assert get_complexity_name(complexity) == name


def test_complexity_stats():
    stats = get_complexity_stats()
    assert [s.level for s in stats] == list(Complexity)
    assert stats[0].avg_ops_per_second == 500000.0
    assert sum(s.algorithm_count for s in stats[:3]) == stats[3].algorithm_count


def test_estimate_total_combinations_zero_packets():
    assert estimate_total_combinations(Complexity.BASIC, 4, 128, 0) == 0


def test_estimate_total_combinations_value():
    assert estimate_total_combinations(Complexity.BASIC, 2, 10, 3) == 1140


def test_estimate_completion_time():
    assert estimate_completion_time(Complexity.BASIC, 2, 10, 3) == pytest.approx(1140 / 500000.0)
    assert estimate_completion_time(Complexity.BASIC, 2, 10, 0) == 0.0


def test_profile_algorithm_performance(capsys):
    rates = profile_algorithm_performance(1)
    assert set(rates) == set(Operation)
    assert all(rate > 0 for rate in rates.values())
    out = capsys.readouterr().out
    assert "Profiling algorithm performance" in out
    assert "Polynomial CRC" in out