"""
Unit tests for token_metadata.validation module.

Tests cover:
- Name, symbol and URI byte limits
- Seller fee ceiling
- Creator count, duplicate addresses and share totals
- Validation on CreateV1Args and UpdateArgs encoding
"""

import pytest

from tests.helpers.factories import make_pubkey
from token_metadata.codec import ByteWriter
from token_metadata.constants import (
    MAX_CREATOR_LIMIT,
    MAX_NAME_LENGTH,
    MAX_SELLER_FEE_BASIS_POINTS,
    MAX_SYMBOL_LENGTH,
    MAX_URI_LENGTH,
)
from token_metadata.errors import MetadataLimitError
from token_metadata.instructions import CreateV1Args, UpdateArgs
from token_metadata.models import Creator, Data
from token_metadata.validation import validate_creators, validate_data_fields


def _creators(*shares: int) -> tuple[Creator, ...]:
    return tuple(
        Creator(address=make_pubkey(10 + i), verified=False, share=share)
        for i, share in enumerate(shares)
    )


def _fields(**overrides: object) -> dict[str, object]:
    fields: dict[str, object] = {
        "name": "Token",
        "symbol": "TKN",
        "uri": "https://example.com/token.json",
        "seller_fee_basis_points": 500,
        "creators": None,
    }
    fields.update(overrides)
    return fields


class TestDataFields:
    """Tests for validate_data_fields."""

    def test_valid_fields(self) -> None:
        """Test that fields at their limits pass."""
        validate_data_fields(
            **_fields(
                name="n" * MAX_NAME_LENGTH,
                symbol="s" * MAX_SYMBOL_LENGTH,
                uri="u" * MAX_URI_LENGTH,
                seller_fee_basis_points=MAX_SELLER_FEE_BASIS_POINTS,
                creators=_creators(100),
            )
        )

    @pytest.mark.parametrize(
        ("field", "limit", "label"),
        [
            ("name", MAX_NAME_LENGTH, "Name"),
            ("symbol", MAX_SYMBOL_LENGTH, "Symbol"),
            ("uri", MAX_URI_LENGTH, "URI"),
        ],
    )
    def test_string_too_long(self, field: str, limit: int, label: str) -> None:
        """Test that a string one byte over its limit is rejected."""
        with pytest.raises(MetadataLimitError, match=f"{label} is {limit + 1} bytes"):
            validate_data_fields(**_fields(**{field: "x" * (limit + 1)}))

    def test_length_counts_utf8_bytes(self) -> None:
        """Test that multi-byte characters count by their encoded size."""
        # 11 characters, 22 bytes
        with pytest.raises(MetadataLimitError, match="Symbol is 22 bytes"):
            validate_data_fields(**_fields(symbol="é" * 11))

    def test_fee_over_limit(self) -> None:
        """Test that a fee above 100 % is rejected."""
        with pytest.raises(MetadataLimitError, match="Seller fee 10001"):
            validate_data_fields(**_fields(seller_fee_basis_points=10_001))


class TestCreators:
    """Tests for validate_creators."""

    def test_empty(self) -> None:
        """Test that an empty creator list is rejected."""
        with pytest.raises(MetadataLimitError, match="at least one creator"):
            validate_creators(())

    def test_too_many(self) -> None:
        """Test that more than five creators is rejected."""
        creators = _creators(*([10] * (MAX_CREATOR_LIMIT + 1)))
        with pytest.raises(MetadataLimitError, match="6 creators given, limit is 5"):
            validate_creators(creators)

    def test_duplicate_address(self) -> None:
        """Test that the same address listed twice is rejected."""
        creator = Creator(address=make_pubkey(10), verified=False, share=50)
        with pytest.raises(MetadataLimitError, match="Duplicate creator address"):
            validate_creators((creator, creator))

    @pytest.mark.parametrize("shares", [(50, 49), (60, 50), (0,)])
    def test_shares_not_100(self, shares: tuple[int, ...]) -> None:
        """Test that shares not adding up to 100 are rejected."""
        with pytest.raises(MetadataLimitError, match=f"got {sum(shares)}"):
            validate_creators(_creators(*shares))

    def test_split_shares(self) -> None:
        """Test that shares split across the maximum creator count pass."""
        validate_creators(_creators(*([20] * MAX_CREATOR_LIMIT)))


class TestEncoding:
    """Tests for validation while encoding instruction arguments."""

    def test_create_rejects_long_name(self) -> None:
        """Test that CreateV1Args refuses to encode an over-long name."""
        args = CreateV1Args(
            name="n" * (MAX_NAME_LENGTH + 1), uri="u", seller_fee_basis_points=0
        )
        with pytest.raises(MetadataLimitError):
            _ = args.serialized

    def test_create_rejects_bad_creators(self) -> None:
        """Test that CreateV1Args refuses a creator list summing under 100."""
        args = CreateV1Args(
            name="A", uri="u", seller_fee_basis_points=0, creators=_creators(40, 40)
        )
        with pytest.raises(MetadataLimitError, match="got 80"):
            _ = args.serialized

    def test_update_rejects_bad_data(self) -> None:
        """Test that UpdateArgs refuses data with a fee above 100 %."""
        data = Data(name="A", symbol="", uri="u", seller_fee_basis_points=20_000)
        with pytest.raises(MetadataLimitError, match="Seller fee 20000"):
            UpdateArgs(data=data).write(ByteWriter())

    def test_update_without_data(self) -> None:
        """Test that UpdateArgs without data skips the checks."""
        w = ByteWriter()
        UpdateArgs().write(w)
        assert w.to_bytes()

    def test_metadata_limit_is_value_error(self) -> None:
        """Test that limit errors can be caught as ValueError."""
        with pytest.raises(ValueError, match="Seller fee"):
            validate_data_fields(**_fields(seller_fee_basis_points=10_001))
