"""
Unit tests for token_metadata.seeds module.

Tests cover:
- Role -> seed string tables for every role family
- Plain string pass-through
- Rejection of ints and members of other enum families
- Seed -> role reverse lookups
- Payload key names
"""

import pytest

from token_metadata.enums import (
    HolderDelegateRole,
    LegacyMetadataDelegateRole,
    MetadataDelegateRole,
    PayloadKey,
    TokenDelegateRole,
)
from token_metadata.errors import EncodingFormatError, InvalidRoleArgumentError
from token_metadata.seeds import (
    METADATA_DELEGATE_ROLE_SEEDS,
    decode_seed,
    encode_holder_delegate_role_seed,
    encode_legacy_metadata_delegate_role_seed,
    encode_metadata_delegate_role_seed,
    holder_delegate_role_from_seed,
    holder_delegate_role_seed,
    legacy_metadata_delegate_role_from_seed,
    legacy_metadata_delegate_role_seed,
    metadata_delegate_role_from_seed,
    metadata_delegate_role_seed,
    payload_key_from_name,
    payload_key_name,
)


class TestMetadataDelegateRoleSeed:
    """Tests for metadata_delegate_role_seed."""

    @pytest.mark.parametrize(
        ("role", "expected"),
        [
            (MetadataDelegateRole.AUTHORITY_ITEM, "authority_item_delegate"),
            (MetadataDelegateRole.COLLECTION, "collection_delegate"),
            (MetadataDelegateRole.USE, "use_delegate"),
            (MetadataDelegateRole.DATA, "data_delegate"),
            (MetadataDelegateRole.PROGRAMMABLE_CONFIG, "programmable_config_delegate"),
            (MetadataDelegateRole.DATA_ITEM, "data_item_delegate"),
            (MetadataDelegateRole.COLLECTION_ITEM, "collection_item_delegate"),
            (
                MetadataDelegateRole.PROGRAMMABLE_CONFIG_ITEM,
                "prog_config_item_delegate",
            ),
        ],
    )
    def test_role_seed(self, role: MetadataDelegateRole, expected: str) -> None:
        """Test each role maps onto its seed string."""
        assert metadata_delegate_role_seed(role) == expected

    def test_table_covers_every_role(self) -> None:
        """Test that no role is missing from the table."""
        assert set(METADATA_DELEGATE_ROLE_SEEDS) == set(MetadataDelegateRole)

    def test_string_passthrough(self) -> None:
        """Test that plain strings are returned unchanged."""
        assert metadata_delegate_role_seed("custom_delegate") == "custom_delegate"

    def test_encoded_seed_is_utf8(self) -> None:
        """Test the byte form of a seed."""
        seed = encode_metadata_delegate_role_seed(MetadataDelegateRole.COLLECTION_ITEM)
        assert seed == b"collection_item_delegate"

    def test_int_rejected(self) -> None:
        """Test that a bare int is not a role."""
        with pytest.raises(InvalidRoleArgumentError, match="MetadataDelegateRole"):
            metadata_delegate_role_seed(1)  # type: ignore[arg-type]

    def test_other_family_rejected(self) -> None:
        """Test that a member of another role family is rejected even if equal."""
        assert TokenDelegateRole.TRANSFER == MetadataDelegateRole.COLLECTION
        with pytest.raises(InvalidRoleArgumentError, match="TRANSFER"):
            metadata_delegate_role_seed(TokenDelegateRole.TRANSFER)  # type: ignore[arg-type]


class TestLegacyMetadataDelegateRoleSeed:
    """Tests for the first-generation metadata delegate table."""

    @pytest.mark.parametrize(
        ("role", "expected"),
        [
            (LegacyMetadataDelegateRole.AUTHORITY, "authority_delegate"),
            (LegacyMetadataDelegateRole.COLLECTION, "collection_delegate"),
            (LegacyMetadataDelegateRole.USE, "use_delegate"),
            (LegacyMetadataDelegateRole.UPDATE, "update_delegate"),
            (
                LegacyMetadataDelegateRole.PROGRAMMABLE_CONFIG,
                "programmable_config_delegate",
            ),
        ],
    )
    def test_role_seed(self, role: LegacyMetadataDelegateRole, expected: str) -> None:
        """Test each legacy role maps onto its seed string."""
        assert legacy_metadata_delegate_role_seed(role) == expected
        assert encode_legacy_metadata_delegate_role_seed(role) == expected.encode()

    def test_current_role_rejected(self) -> None:
        """Test that the two generations are not interchangeable."""
        with pytest.raises(InvalidRoleArgumentError):
            legacy_metadata_delegate_role_seed(MetadataDelegateRole.COLLECTION)  # type: ignore[arg-type]


class TestHolderDelegateRoleSeed:
    """Tests for holder delegate seeds."""

    def test_print_delegate(self) -> None:
        """Test the only holder role."""
        assert holder_delegate_role_seed(HolderDelegateRole.PRINT_DELEGATE) == (
            "print_delegate"
        )
        assert encode_holder_delegate_role_seed(HolderDelegateRole.PRINT_DELEGATE) == (
            b"print_delegate"
        )

    def test_none_rejected(self) -> None:
        """Test that None is not a role."""
        with pytest.raises(InvalidRoleArgumentError, match="None"):
            holder_delegate_role_seed(None)  # type: ignore[arg-type]


class TestReverseLookup:
    """Tests for seed -> role lookups."""

    def test_metadata_role_from_str(self) -> None:
        """Test a reverse lookup from a string."""
        assert metadata_delegate_role_from_seed("data_item_delegate") is (
            MetadataDelegateRole.DATA_ITEM
        )

    def test_metadata_role_from_bytes(self) -> None:
        """Test a reverse lookup from seed bytes."""
        assert metadata_delegate_role_from_seed(b"prog_config_item_delegate") is (
            MetadataDelegateRole.PROGRAMMABLE_CONFIG_ITEM
        )

    def test_legacy_role_from_seed(self) -> None:
        """Test that the legacy table has its own update role."""
        assert legacy_metadata_delegate_role_from_seed("update_delegate") is (
            LegacyMetadataDelegateRole.UPDATE
        )
        with pytest.raises(InvalidRoleArgumentError):
            metadata_delegate_role_from_seed("update_delegate")

    def test_holder_role_from_seed(self) -> None:
        """Test the holder reverse lookup."""
        assert holder_delegate_role_from_seed(b"print_delegate") is (
            HolderDelegateRole.PRINT_DELEGATE
        )

    def test_unknown_seed(self) -> None:
        """Test that an unknown seed names the family."""
        with pytest.raises(InvalidRoleArgumentError, match="HolderDelegateRole seed"):
            holder_delegate_role_from_seed("sale_delegate")

    def test_decode_seed_invalid_utf8(self) -> None:
        """Test that non UTF-8 seeds are rejected."""
        with pytest.raises(EncodingFormatError, match="UTF-8"):
            decode_seed(b"\xff\xfe")


class TestPayloadKeyName:
    """Tests for authorization payload key names."""

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            (PayloadKey.AMOUNT, "amount"),
            (PayloadKey.AUTHORITY_SEEDS, "authority_seeds"),
            (PayloadKey.DESTINATION, "destination"),
            (PayloadKey.HOLDER, "holder"),
            (PayloadKey.SOURCE_SEEDS, "source_seeds"),
        ],
    )
    def test_key_name(self, key: PayloadKey, expected: str) -> None:
        """Test payload key names."""
        assert payload_key_name(key) == expected
        assert payload_key_from_name(expected) is key

    def test_every_key_named(self) -> None:
        """Test that every payload key round-trips through its name."""
        for key in PayloadKey:
            assert payload_key_from_name(payload_key_name(key)) is key
