# cads

This package provides building blocks for finding the checksum algorithm behind
captured packets, such as the frames a radio sends over its serial link. You
supply packets with their known checksums. The package supplies the operations
that candidate algorithms are built from. It also supplies a registry that
describes those operations, loaders for packet datasets and containers for the
solutions a search finds.

It has no dependencies outside the standard library.

## Modules

### `cads.operations`

- `Operation` is an `IntEnum` of the 29 primitive operations. `Complexity` is a
  tier: `BASIC`, `INTERMEDIATE`, `ADVANCED` or `ALL`. Each tier includes the
  tiers below it.
- Each operation is a function `f(a, b, constant)` that returns an unsigned
  64-bit integer. An operation ignores any argument it does not use.
  - Basic: `basic_add`, `basic_sub`, `basic_xor`, `basic_and`, `basic_or`,
    `basic_identity`.
  - Intermediate: `intermediate_not`, `intermediate_lshift`,
    `intermediate_rshift`, `intermediate_mul`, `intermediate_div`,
    `intermediate_mod`, `intermediate_negate`, `intermediate_const_add`,
    `intermediate_const_xor`, `intermediate_const_sub`,
    `intermediate_ones_complement`, `intermediate_twos_complement`.
  - Advanced: `advanced_rotleft`, `advanced_rotright`, `advanced_crc8_ccitt`,
    `advanced_crc8_dallas`, `advanced_crc8_sae`, `advanced_fletcher8`,
    `advanced_swap_nibbles`, `advanced_reverse_bits`, `advanced_lookup_table`,
    `advanced_poly_crc`, `advanced_checksum_variant`.
- A multiplication by zero counts as multiplication by 1. Division and modulo by
  zero give 0. Shift counts use only their low 6 bits.
- Helpers: `rotate_left(value, positions, bit_width)`,
  `rotate_right(value, positions, bit_width)` and
  `reverse_bits(value, bit_width)`. A width of 0 or above 64 means 64.
- Tables: `CRC8_CCITT_TABLE` (polynomial 0x07) and `SAMPLE_LOOKUP_TABLE`.

### `cads.registry`

- `AlgorithmEntry` holds the details of one operation: its `op`, `complexity`,
  short `name` (such as `"C+"`), `description`, `requires_constant`, `func` and
  `computational_weight`.
- `get_all_algorithms()` returns every entry in registry order.
  `get_algorithms_by_complexity(complexity)` returns every entry at or below a
  tier. `get_algorithm_by_operation(op)` returns one entry, or `None`.
- `execute_algorithm(op, a, b, constant)` runs an operation by its value. An
  unknown operation gives 0.
- `get_complexity_name(complexity)` returns the tier's name, or `"Unknown"`.
  `get_complexity_stats()` returns a `ComplexityStats` for each tier.
- `estimate_total_combinations(complexity, max_fields, max_constants, packet_count)`
  gives a rough size for the search space.
  `estimate_completion_time(...)` takes the same arguments and gives an
  estimated time in seconds, worked out from the tier's typical throughput.
- `profile_algorithm_performance(iterations=10000)` times every operation. It
  prints the rates and returns a dict that maps each `Operation` to its
  operations per second.

### `cads.packets`

- `Packet` is a frozen record with the fields `data` (bytes),
  `expected_checksum`, `checksum_size` and `description`. It has a
  `packet_length` property and an `is_valid()` method.
- `PacketDataset` is a list of packets that you can iterate and index.
  - `add_hex(hex_data, hex_checksum, checksum_size, description)` adds a packet
    from hex strings.
  - `add_bytes(data, checksum, checksum_size, description)` adds a packet from
    raw bytes and an integer checksum.
  - `min_packet_length()` returns the length of the shortest packet.
- `parse_hex_bytes(text)` decodes hex and skips whitespace. It raises
  `ValueError` on any other character or on an odd number of digits.
  `parse_hex_checksum(text, checksum_size)` reads the first
  `2 * checksum_size` hex digits.
- `load_packets_from_json(path)` reads JSON Lines:

  ```
  {"packet": "9c30010000000000", "checksum": "31", "description": "CH1"}
  {"packet": "9c30020000000000", "checksum": "32", "description": "CH2"}
  ```

  It skips blank lines and lines that start with `#` or `/`. It writes a warning
  to stderr for each line it cannot parse. A packet without a description gets
  `Packet_<line>`. Every packet gets a 1-byte checksum. The function raises
  `ValueError` if it loads no packets, and `OSError` if the file cannot be
  opened.
- `load_packets_from_csv(path)` reads rows of
  `description,packet_data,expected_checksum` that follow a header line. It
  skips rows that are incomplete or that hold invalid hex.
- `extract_checksum_from_packet(full_packet, checksum_size, little_endian)`
  reads the trailing checksum bytes of a packet.

### `cads.results`

- `ChecksumSolution` is a frozen record with the fields `field_indices`,
  `operations`, `constant`, `checksum_size` and `validated`. It has
  `field_count` and `operation_count` properties. `sort_key()` orders simpler
  solutions first.
- `SearchResults` holds `solutions`, `tests_performed`, `search_completed` and
  `early_exit_triggered`. It has `add_solution(solution)` and
  `sort_solutions()`, which gives the same order every time.
- `should_continue_search(results, early_exit, max_solutions)` returns `False`
  once early exit has a solution, or once the solution limit is reached.
- `extract_packet_field_value(packet_data, field_index, checksum_size)` reads a
  big-endian field value. `mask_checksum_to_size(checksum, checksum_size)` keeps
  only the low bytes of a checksum.
- `build_field_cache(dataset, checksum_size, max_fields)` returns a
  `FieldCache` of precomputed field values. Read a value with
  `FieldCache.value(packet_index, field_index)`.

## Example

This example checks a known algorithm against every packet in a file:

```python
from cads.operations import Operation
from cads.packets import load_packets_from_json
from cads.registry import execute_algorithm

dataset = load_packets_from_json("gmrs.jsonl")
for packet in dataset:
    data = packet.data
    value = execute_algorithm(Operation.ADD, data[5], data[4], 0)
    value = execute_algorithm(Operation.ONES_COMPLEMENT, value, 0, 0)
    value = execute_algorithm(Operation.CONST_ADD, value, 0, 0xD0)
    value = execute_algorithm(Operation.XOR, value, data[3], 0)
    value = execute_algorithm(Operation.XOR, value, data[2], 0)
    value = execute_algorithm(Operation.ONES_COMPLEMENT, value, 0, 0)
    print(packet.description, (value & 0xFF) == packet.expected_checksum)
```

## What it does not do

The package has no search engine. Nothing here works through field
permutations, operation sequences and constants to find solutions by itself,
and it has no threaded search and no progress display. It also installs no
command-line program. You build the search loop from the pieces above, and you
record what it finds in `SearchResults`.

## Installing and testing

```
pip install .
pip install .[test]
pytest
```