"""
Credential status, the pointer from a credential into a revocation list.
See https://w3c-ccg.github.io/vc-status-rl-2020/#revocationlist2020status
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Protocol, Tuple, Union, runtime_checkable

from rl2020.constants import TYPE_REVOCATION_LIST_2020_STATUS
from rl2020.errors import ParseError


@runtime_checkable
class CredentialStatus(Protocol):
    """
    Anything that can locate a credential within a revocation list
    """

    def coordinates(self) -> Tuple[str, int]:
        """
        The revocation list id to check and the index within the list
        """
        ...

    def type_def(self) -> Tuple[str, str]:
        """
        The id and the type of the credential status itself
        """
        ...


@dataclass
class CredentialStatusJSON:
    id: str
    type: str
    revocation_list_index: int
    revocation_list_credential: str

    def coordinates(self) -> Tuple[str, int]:
        return self.revocation_list_credential, self.revocation_list_index

    def type_def(self) -> Tuple[str, str]:
        return self.id, self.type

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "revocationListIndex": self.revocation_list_index,
            "revocationListCredential": self.revocation_list_credential,
        }

    def to_json(self) -> bytes:
        return json.dumps(self.to_dict()).encode()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CredentialStatusJSON":
        if not isinstance(data, dict):
            raise ParseError(f"credential status must be an object, got {type(data).__name__}")
        try:
            status = cls(
                id=data["id"],
                type=data["type"],
                revocation_list_index=data["revocationListIndex"],
                revocation_list_credential=data["revocationListCredential"],
            )
        except KeyError as err:
            raise ParseError(f"credential status is missing field {err}") from err
        for name in ("id", "type", "revocation_list_credential"):
            if not isinstance(getattr(status, name), str):
                raise ParseError(f"credential status field {name} must be a string")
        index = status.revocation_list_index
        # bool is an int subclass, but never a valid index
        if not isinstance(index, int) or isinstance(index, bool):
            raise ParseError(f"credential status index must be an integer, got {index!r}")
        return status

    @classmethod
    def from_json(cls, data: Union[bytes, str]) -> "CredentialStatusJSON":
        try:
            doc = json.loads(data)
        except (ValueError, TypeError) as err:
            raise ParseError(f"invalid credential status document: {err}") from err
        return cls.from_dict(doc)


def new_credential_status(rl_credential: str, rl_index: int) -> CredentialStatusJSON:
    """
    Create the credential status for the credential at rl_index
    in the revocation list rl_credential
    """
    return CredentialStatusJSON(
        id=f"{rl_credential}/{rl_index}",
        type=TYPE_REVOCATION_LIST_2020_STATUS,
        revocation_list_index=rl_index,
        revocation_list_credential=rl_credential,
    )
