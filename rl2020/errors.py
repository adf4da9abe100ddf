"""Revocation list error classes."""


class RevocationListError(Exception):
    """Base exception for revocation list errors."""


class RangeError(RevocationListError, ValueError):
    """A list size or a credential index is outside its valid bounds."""


class ParseError(RevocationListError, ValueError):
    """A serialized document could not be turned into a revocation list."""


class DecodeError(RevocationListError, ValueError):
    """An encoded list is not valid base64 or not a valid zlib stream."""


class ValidationError(RevocationListError):
    """A credential status does not point into this revocation list."""
