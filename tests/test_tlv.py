import hashlib

import pytest

from eid_integrity import RecordParseError, parse_record, read_photo_digest
from eid_integrity.tlv import iter_fields

from conftest import encode_field, make_identity


def test_short_and_long_lengths():
    long_value = b"x" * 300
    data = encode_field(1, b"abc") + encode_field(2, long_value) + encode_field(3, b"")
    assert encode_field(2, long_value)[1:3] == bytes([0x82, 0x2C])
    assert list(iter_fields(data)) == [(1, b"abc"), (2, long_value), (3, b"")]


def test_stops_at_fill():
    data = encode_field(1, b"Wetstraat") + b"\x00" * 40
    record = parse_record(data)
    assert list(record.items()) == [(1, b"Wetstraat")]
    assert record.text(1) == "Wetstraat"
    assert record.text(9) is None


def test_truncated_value():
    with pytest.raises(RecordParseError):
        parse_record(b"\x01\x10abc")
    with pytest.raises(RecordParseError):
        parse_record(b"\x01\x81")


def test_photo_digest(photo):
    assert read_photo_digest(make_identity(photo)) == hashlib.sha256(photo).digest()
    with pytest.raises(RecordParseError):
        read_photo_digest(encode_field(1, b"no photo"))
