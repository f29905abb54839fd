"""Minimal reader for the TLV layout of identity and address card files.

Each field is one tag byte, a length and the value. The length is a run of
7-bit groups, most significant first; a set top bit means another length
byte follows. A zero tag marks the start of the fill area.
"""

from collections import OrderedDict

from .config import PHOTO_DIGEST_TAG
from .errors import RecordParseError


class TlvRecord(OrderedDict):
    """Card file fields, tag -> raw value, in file order."""

    def text(self, tag, encoding="utf-8"):
        value = self.get(tag)
        if value is None:
            return None
        return value.decode(encoding, errors="replace")


def iter_fields(data):
    idx = 0
    while idx < len(data):
        tag = data[idx]
        if tag == 0x00:
            return
        idx += 1

        length = 0
        while True:
            if idx >= len(data):
                raise RecordParseError(f"truncated length for tag {tag}")
            length_byte = data[idx]
            idx += 1
            length = (length << 7) | (length_byte & 0x7F)
            if not length_byte & 0x80:
                break

        if idx + length > len(data):
            raise RecordParseError(
                f"tag {tag} declares {length} bytes, only {len(data) - idx} left")
        yield tag, bytes(data[idx:idx + length])
        idx += length


def parse_record(data):
    """Split a verified card file into a :class:`TlvRecord`."""
    record = TlvRecord()
    for tag, value in iter_fields(data):
        record[tag] = value
    return record


def read_photo_digest(identity_data):
    """Return the photo digest embedded in an identity file."""
    for tag, value in iter_fields(identity_data):
        if tag == PHOTO_DIGEST_TAG:
            return value
    raise RecordParseError("identity file has no photo digest")
