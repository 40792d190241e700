from __future__ import annotations


class TokenMetadataError(Exception):
    """Base class for all SDK errors."""


class InvalidRoleArgumentError(TokenMetadataError, ValueError):
    """Raised when a role or payload key is neither a string nor a known enum member."""


class AddressDerivationError(TokenMetadataError, RuntimeError):
    """Raised when a program-derived address cannot be found for a seed list."""


class EncodingRangeError(TokenMetadataError, ValueError):
    """Raised when a value does not fit the wire width it is encoded into."""


class EncodingFormatError(TokenMetadataError, ValueError):
    """Raised when bytes are malformed (bad bool byte, option tag or UTF-8)."""


class BufferUnderrunError(TokenMetadataError, ValueError):
    """Raised when decoding reads past the end of the input buffer."""


class UnknownVariantError(TokenMetadataError, ValueError):
    """Raised when a tagged union discriminator has no matching variant."""


class AccountNotFoundError(TokenMetadataError, LookupError):
    """Raised when a required account does not exist on chain."""


class AccountKeyMismatchError(TokenMetadataError, ValueError):
    """Raised when an account's leading Key byte is not the one expected for its layout."""


class MetadataLimitError(TokenMetadataError, ValueError):
    """Raised when metadata fields break a program limit (lengths, creators, fees)."""


class InvalidEditionAccountError(TokenMetadataError, ValueError):
    """
    Raised when the edition PDA of a mint holds an unexpected account kind, or
    is missing for a non-fungible token standard.
    """


class MissingRpcClientError(TokenMetadataError, RuntimeError):
    """Raised when a read operation requires an RPC client but none is configured."""


class JsonMetadataError(TokenMetadataError, RuntimeError):
    """Raised when the off-chain JSON metadata cannot be downloaded or decoded."""
