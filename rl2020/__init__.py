"""
Implementation of the Revocation List 2020 specification.
See here for details: https://w3c-ccg.github.io/vc-status-rl-2020/
"""

import json
import logging
from typing import Any, Dict, Union

from rl2020.bitset import BitSet
from rl2020.codec import pack, unpack
from rl2020.constants import (
    DEFAULT_LIST_SIZE,
    KILOBYTE,
    MAX_LIST_SIZE,
    MIN_LIST_SIZE,
    RESET,
    REVOKE,
    TYPE_REVOCATION_LIST_2020,
    TYPE_REVOCATION_LIST_2020_CREDENTIAL,
    TYPE_REVOCATION_LIST_2020_STATUS,
)
from rl2020.errors import (
    DecodeError,
    ParseError,
    RangeError,
    RevocationListError,
    ValidationError,
)
from rl2020.status import CredentialStatus, CredentialStatusJSON, new_credential_status

__all__ = [
    "BitSet",
    "CredentialStatus",
    "CredentialStatusJSON",
    "DEFAULT_LIST_SIZE",
    "DecodeError",
    "MAX_LIST_SIZE",
    "MIN_LIST_SIZE",
    "ParseError",
    "RESET",
    "REVOKE",
    "RangeError",
    "RevocationList2020",
    "RevocationListError",
    "TYPE_REVOCATION_LIST_2020",
    "TYPE_REVOCATION_LIST_2020_CREDENTIAL",
    "TYPE_REVOCATION_LIST_2020_STATUS",
    "ValidationError",
    "new_credential_status",
    "pack",
    "unpack",
]

log = logging.getLogger(__name__)


def _is_index(value) -> bool:
    # bool is an int subclass, but never a valid index
    return isinstance(value, int) and not isinstance(value, bool)


def _check_size(size_kb: int):
    if size_kb > MAX_LIST_SIZE or size_kb < MIN_LIST_SIZE:
        raise RangeError(
            f"size must be between {MIN_LIST_SIZE} and {MAX_LIST_SIZE}, got {size_kb}"
        )


class RevocationList2020:
    """
    The credential subject of a RevocationList2020 credential.

    encoded_list always holds the packed form of the bit set: every
    mutation re-packs before returning.
    """

    id: str
    type: str
    encoded_list: str
    _bitset: BitSet

    def __init__(self, id: str, encoded_list: str, bitset: BitSet):
        self.id = id
        self.type = TYPE_REVOCATION_LIST_2020
        self.encoded_list = encoded_list
        self._bitset = bitset

    @classmethod
    def new(cls, id: str, size_kb: int = DEFAULT_LIST_SIZE) -> "RevocationList2020":
        """
        Create an empty revocation list of size_kb kilobytes
        """
        _check_size(size_kb)
        bs = BitSet.new(size_kb)
        log.debug("new revocation list %s, size %dkb", id, size_kb)
        return cls(id, pack(bs), bs)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RevocationList2020":
        """
        Rebuild a revocation list from its parsed document
        """
        if not isinstance(data, dict):
            raise ParseError(f"revocation list must be an object, got {type(data).__name__}")
        for field in ("id", "type", "encodedList"):
            if field not in data:
                raise ParseError(f"revocation list is missing field {field}")
            if not isinstance(data[field], str):
                raise ParseError(f"revocation list field {field} must be a string")
        if data["id"].strip() == "":
            raise ParseError("revocation list has no ID")
        if data["type"] != TYPE_REVOCATION_LIST_2020:
            raise ParseError(
                f"unsupported type {data['type']}, expected {TYPE_REVOCATION_LIST_2020}"
            )
        try:
            bs = unpack(data["encodedList"])
        except DecodeError as err:
            raise ParseError(f"revocation list {data['id']}: {err}") from err
        # a crafted document can declare any size, check it again
        _check_size(bs.size())
        if len(bs) % KILOBYTE != 0:
            raise RangeError(
                f"size must be a multiple of {KILOBYTE} bytes, got {len(bs)}"
            )
        log.debug("parsed revocation list %s, size %dkb", data["id"], bs.size())
        return cls(data["id"], data["encodedList"], bs)

    @classmethod
    def from_json(cls, data: Union[bytes, str]) -> "RevocationList2020":
        try:
            doc = json.loads(data)
        except (ValueError, TypeError) as err:
            raise ParseError(f"invalid revocation list document: {err}") from err
        return cls.from_dict(doc)

    def capacity(self) -> int:
        """
        Number of credentials that can be handled by this revocation list
        """
        return self._bitset.len_bits()

    def size(self) -> int:
        """
        Size of the revocation list in kilobytes
        """
        return self._bitset.size()

    def update(self, action: bool, *indexes: int):
        """
        Set a list of credential indexes either to revoked (action REVOKE)
        or to valid (action RESET).

        All indexes are checked before any bit is touched, so a failing
        call leaves the list unchanged.
        """
        capacity = self.capacity()
        for i in indexes:
            if not _is_index(i) or i < 0 or i >= capacity:
                raise RangeError(f"credential index out of range 0-{capacity}: {i}")
        for i in indexes:
            self._bitset.set_bit(i, action)
        self.encoded_list = pack(self._bitset)
        log.debug(
            "%s %d credentials in revocation list %s",
            "revoked" if action else "reset",
            len(indexes),
            self.id,
        )

    def revoke(self, *credentials: int):
        """
        Revoke credentials by index, that is, set the corresponding bits to 1
        """
        self.update(REVOKE, *credentials)

    def reset(self, *credentials: int):
        """
        Reset credentials by index, that is, set the corresponding bits to 0
        """
        self.update(RESET, *credentials)

    def is_revoked(self, status: CredentialStatus) -> bool:
        """
        Check if the credential the status points to is revoked
        """
        cs_id, cs_type = status.type_def()
        if not isinstance(cs_id, str) or cs_id.strip() == "":
            raise ValidationError("credential status ID is empty")
        if cs_type != TYPE_REVOCATION_LIST_2020_STATUS:
            raise ValidationError(
                f"unsupported type {cs_type}, expected {TYPE_REVOCATION_LIST_2020_STATUS}"
            )
        rl_id, index = status.coordinates()
        if rl_id != self.id:
            raise ValidationError(f"wrong revocation list, expected {self.id}, got {rl_id}")
        if not _is_index(index) or index < 0 or index >= self.capacity():
            raise ValidationError(
                f"credential index out of range 0-{self.capacity()}: {index}"
            )
        return self._bitset.get_bit(index)

    def bitset(self) -> bytes:
        return self._bitset.to_bytes()

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "type": self.type, "encodedList": self.encoded_list}

    def to_json(self) -> bytes:
        """
        The JSON document of the list, the bit set only appears packed
        """
        return json.dumps(self.to_dict()).encode()

    def __eq__(self, other):
        if not isinstance(other, RevocationList2020):
            return NotImplemented
        return (
            self.id == other.id
            and self.type == other.type
            and self.encoded_list == other.encoded_list
            and self._bitset == other._bitset
        )

    def __repr__(self):
        return f"RevocationList2020(id={self.id!r}, size={self.size()}kb)"
