"""Packet datasets: known packets paired with the checksum they carry."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import Iterator, Sequence

__all__ = [
    "Packet",
    "PacketDataset",
    "parse_hex_bytes",
    "parse_hex_checksum",
    "load_packets_from_csv",
    "load_packets_from_json",
    "extract_checksum_from_packet",
]

_U64 = (1 << 64) - 1
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_WHITESPACE = frozenset(" \t\n\r\v\f")

# Longest accepted values (exclusive) for the fields of a JSON line.
_PACKET_FIELD_LIMIT = 256
_CHECKSUM_FIELD_LIMIT = 16
_DESCRIPTION_FIELD_LIMIT = 128


def parse_hex_bytes(text: str) -> bytes:
    """Decode a hex string, ignoring whitespace.

    Raises ValueError on a non-hex character or an odd number of digits.
    """
    digits = []
    for char in text:
        if char in _HEX_DIGITS:
            digits.append(char)
        elif char not in _WHITESPACE:
            raise ValueError(f"invalid hex character {char!r} in {text!r}")
    if len(digits) % 2:
        raise ValueError(f"odd number of hex digits in {text!r}")
    return bytes.fromhex("".join(digits))


def parse_hex_checksum(text: str, checksum_size: int) -> int:
    """Read a checksum from the first ``2 * checksum_size`` characters of ``text``.

    Whitespace and non-hex characters inside that window are skipped.
    Sizes outside 1..8 yield 0.
    """
    if checksum_size <= 0 or checksum_size > 8:
        return 0
    checksum = 0
    for char in text[: checksum_size * 2]:
        if char in _HEX_DIGITS:
            checksum = (checksum << 4) | int(char, 16)
    return checksum


@dataclass(frozen=True)
class Packet:
    """A packet body and the checksum expected for it."""

    data: bytes
    expected_checksum: int
    checksum_size: int
    description: str

    @property
    def packet_length(self) -> int:
        return len(self.data)

    def is_valid(self) -> bool:
        """True if the packet has data, a 1..8 byte checksum and a description."""
        return (
            len(self.data) > 0
            and 1 <= self.checksum_size <= 8
            and isinstance(self.description, str)
        )


@dataclass
class PacketDataset:
    """An ordered collection of packets."""

    packets: list[Packet] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.packets)

    def __iter__(self) -> Iterator[Packet]:
        return iter(self.packets)

    def __getitem__(self, index: int) -> Packet:
        return self.packets[index]

    def add_hex(
        self, hex_data: str, hex_checksum: str, checksum_size: int, description: str
    ) -> Packet:
        """Add a packet given as hex strings; raises ValueError on bad hex data."""
        packet = Packet(
            data=parse_hex_bytes(hex_data),
            expected_checksum=parse_hex_checksum(hex_checksum, checksum_size),
            checksum_size=checksum_size,
            description=description,
        )
        self.packets.append(packet)
        return packet

    def add_bytes(
        self, data: Sequence[int], checksum: int, checksum_size: int, description: str
    ) -> Packet:
        """Add a packet given as raw bytes and an integer checksum."""
        packet = Packet(
            data=bytes(data),
            expected_checksum=checksum & _U64,
            checksum_size=checksum_size,
            description=description,
        )
        self.packets.append(packet)
        return packet

    def min_packet_length(self) -> int:
        """Length of the shortest packet; raises ValueError when empty."""
        if not self.packets:
            raise ValueError("dataset is empty")
        return min(len(packet.data) for packet in self.packets)


def _strip_quotes(value: str) -> str:
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value


def load_packets_from_csv(path: str | os.PathLike[str]) -> PacketDataset:
    """Load ``description,packet_data,expected_checksum`` rows after a header line.

    Rows that are incomplete or carry invalid hex are skipped.
    """
    dataset = PacketDataset()
    with open(path, encoding="utf-8", errors="replace") as handle:
        next(handle, None)
        for line in handle:
            tokens = [token for token in line.split(",") if token]
            if len(tokens) < 3:
                continue
            tail = [
                token
                for token in ",".join(tokens[2:]).replace("\r", ",").replace("\n", ",").split(",")
                if token
            ]
            if not tail:
                continue
            description = _strip_quotes(tokens[0])
            packet_hex = _strip_quotes(tokens[1])
            checksum_hex = _strip_quotes(tail[0])
            try:
                dataset.add_hex(packet_hex, checksum_hex, 1, description)
            except ValueError:
                continue
    return dataset


def _json_string_field(line: str, key: str, limit: int) -> str:
    start = line.find(f'"{key}"')
    if start < 0:
        return ""
    colon = line.find(":", start)
    if colon < 0:
        return ""
    opening = line.find('"', colon)
    if opening < 0:
        return ""
    opening += 1
    closing = line.find('"', opening)
    if closing < 0 or closing - opening >= limit - 1:
        return ""
    return line[opening:closing]


def load_packets_from_json(path: str | os.PathLike[str] | None) -> PacketDataset:
    """Load packets from a JSON Lines file of packet/checksum/description objects.

    Blank lines and lines starting with ``#`` or ``/`` are skipped; other
    unparsable lines produce a warning.  Raises ValueError if no packet
    could be loaded and OSError if the file cannot be opened.
    """
    if path is None:
        raise ValueError("no packet file given")
    dataset = PacketDataset()
    with open(path, encoding="utf-8", errors="replace") as handle:
        for line_number, line in enumerate(handle, start=1):
            if line[:1] in ("\n", "#", "/"):
                continue
            packet_hex = _json_string_field(line, "packet", _PACKET_FIELD_LIMIT)
            checksum_hex = _json_string_field(line, "checksum", _CHECKSUM_FIELD_LIMIT)
            description = _json_string_field(line, "description", _DESCRIPTION_FIELD_LIMIT)

            if not packet_hex or not checksum_hex:
                print(f"Warning: Failed to parse line {line_number}: {line}",
                      end="", file=sys.stderr)
                continue
            if not description:
                description = f"Packet_{line_number}"
            try:
                dataset.add_hex(packet_hex, checksum_hex, 1, description)
            except ValueError:
                print(f"Warning: Failed to add packet from line {line_number}",
                      file=sys.stderr)

    if not dataset.packets:
        raise ValueError(f"No valid packets found in {path}")
    print(f"\n📦 Loaded {len(dataset)} packets from {path}")
    return dataset


def extract_checksum_from_packet(
    full_packet: bytes, checksum_size: int, little_endian: bool
) -> int:
    """Read the trailing ``checksum_size`` bytes of a packet as an integer.

    Returns 0 when the packet is shorter than the checksum.
    """
    if checksum_size <= 0 or len(full_packet) < checksum_size:
        return 0
    tail = bytes(full_packet[len(full_packet) - checksum_size:])
    return int.from_bytes(tail, "little" if little_endian else "big") & _U64