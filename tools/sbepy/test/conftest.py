"""Shared fixtures for sbepy tests."""

import pytest
import sys
import os

# Add the project root to sys.path so 'tools.sbepy' is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", ".."))

from tools.sbepy.schema import parse_message_yaml


TRADE_CAPTURE_YAML = """\
message:
  name: tradeCapture
  byteOrder: littleEndian
  description: Executed trade report.

fields:
  - name: tradeId
    type: uint64
  - name: price
    type: double
  - name: quantity
    type: int32
  - name: side
    type: char
  - name: maxQty
    type: uint64
    constant: "-1"
    description: Sentinel for an unbounded quantity.
  - name: noPrice
    type: double
    constant: NaN
  - name: venueCode
    type: char
    constant: X
"""


BIG_ENDIAN_YAML = """\
message:
  name: Heartbeat
  byteOrder: bigEndian

fields:
  - name: seqNum
    type: uint32
  - name: flags
    type: uint8
  - name: timestamp
    type: int64
"""


CONSTANTS_ONLY_YAML = """\
message:
  name: Limits

fields:
  - name: maxValue
    type: uint64
    constant: 18446744073709551615
  - name: minDelta
    type: int16
    constant: -32768
"""


@pytest.fixture
def trade_capture_yaml():
    """Little-endian message with encoded fields and constants."""
    return TRADE_CAPTURE_YAML


@pytest.fixture
def big_endian_yaml():
    """Big-endian message with no constants."""
    return BIG_ENDIAN_YAML


@pytest.fixture
def trade_capture():
    """Parsed tradeCapture description."""
    return parse_message_yaml(TRADE_CAPTURE_YAML)


@pytest.fixture
def heartbeat():
    """Parsed Heartbeat description."""
    return parse_message_yaml(BIG_ENDIAN_YAML)


@pytest.fixture
def limits():
    """Parsed description holding only constants."""
    return parse_message_yaml(CONSTANTS_ONLY_YAML)
