"""
Unit tests for token_metadata.errors module.

Tests cover:
- Every SDK error derives from TokenMetadataError
- Errors keep their builtin category for callers catching ValueError,
  LookupError or RuntimeError
"""

import pytest

from token_metadata import errors
from token_metadata.errors import TokenMetadataError


def _error_classes() -> list[type[Exception]]:
    return [
        obj
        for obj in vars(errors).values()
        if isinstance(obj, type)
        and issubclass(obj, Exception)
        and obj.__module__ == errors.__name__
    ]


class TestHierarchy:
    """Tests for the error hierarchy."""

    @pytest.mark.parametrize("cls", _error_classes(), ids=lambda c: c.__name__)
    def test_base_class(self, cls: type[Exception]) -> None:
        """Test that each error can be caught as TokenMetadataError."""
        assert issubclass(cls, TokenMetadataError)
        assert cls.__doc__

    @pytest.mark.parametrize(
        ("cls", "builtin"),
        [
            (errors.InvalidRoleArgumentError, ValueError),
            (errors.AddressDerivationError, RuntimeError),
            (errors.EncodingRangeError, ValueError),
            (errors.EncodingFormatError, ValueError),
            (errors.BufferUnderrunError, ValueError),
            (errors.UnknownVariantError, ValueError),
            (errors.AccountNotFoundError, LookupError),
            (errors.AccountKeyMismatchError, ValueError),
            (errors.MetadataLimitError, ValueError),
            (errors.InvalidEditionAccountError, ValueError),
            (errors.MissingRpcClientError, RuntimeError),
            (errors.JsonMetadataError, RuntimeError),
        ],
    )
    def test_builtin_category(self, cls: type[Exception], builtin: type[Exception]) -> None:
        """Test the builtin exception each error also derives from."""
        assert issubclass(cls, builtin)

    def test_message_preserved(self) -> None:
        """Test that raising keeps the message."""
        with pytest.raises(TokenMetadataError, match="not found: abc"):
            raise errors.AccountNotFoundError("Mint account not found: abc")
