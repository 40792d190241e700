"""
Unit tests for token_metadata.models module.

Tests cover:
- Metadata layout, trailing fields of older accounts and zero padding
- Edition, master edition and edition marker accounts
- Token record and delegate record accounts
- Tagged unions (collection details, print supply, toggle, escrow authority)
- Authorization payload encoding
- SPL mint and token account layouts
- account_key discrimination
"""

import pytest

from tests.helpers.factories import (
    make_master_edition,
    make_metadata,
    make_mint,
    make_pubkey,
    make_token_account,
)
from token_metadata.codec import ByteReader, ByteWriter
from token_metadata.constants import MINT_SIZE, TOKEN_ACCOUNT_SIZE
from token_metadata.enums import (
    AccountState,
    Key,
    TokenDelegateRole,
    TokenStandard,
    TokenState,
    UseMethod,
)
from token_metadata.errors import (
    AccountKeyMismatchError,
    BufferUnderrunError,
    EncodingRangeError,
    UnknownVariantError,
)
from token_metadata.models import (
    AuthorizationData,
    Collection,
    CollectionDetails,
    CollectionDetailsKind,
    Edition,
    EditionMarker,
    EditionMarkerV2,
    EscrowAuthority,
    MasterEdition,
    Metadata,
    MetadataDelegateRecord,
    Mint,
    Payload,
    PayloadType,
    PrintSupply,
    PrintSupplyKind,
    ProgrammableConfig,
    Toggle,
    TokenAccount,
    TokenOwnedEscrow,
    TokenRecord,
    UseAuthorityRecord,
    Uses,
    account_key,
)

# Six trailing option tags: edition_nonce .. programmable_config.
TRAILING_OPTIONS = 6


def _write(value: object, write: object) -> bytes:
    w = ByteWriter()
    write(value, w)  # type: ignore[operator]
    return w.to_bytes()


class TestMetadata:
    """Tests for the Metadata account."""

    def test_encode_decode(self) -> None:
        """Test that a fully populated account decodes to the same value."""
        mint = make_pubkey(1)
        metadata = Metadata(
            update_authority=make_pubkey(2),
            mint=mint,
            name="Asset",
            symbol="AST",
            uri="https://example.com/a.json",
            seller_fee_basis_points=250,
            edition_nonce=254,
            token_standard=TokenStandard.PROGRAMMABLE_NON_FUNGIBLE,
            collection=Collection(verified=True, key=make_pubkey(9)),
            uses=Uses(UseMethod.MULTIPLE, remaining=3, total=5),
            collection_details=CollectionDetails.v1(12),
            programmable_config=ProgrammableConfig(rule_set=make_pubkey(8)),
        )
        assert Metadata.from_bytes(metadata.serialized) == metadata

    def test_layout_prefix(self) -> None:
        """Test the key byte, authorities and the first length-prefixed string."""
        metadata = make_metadata(make_pubkey(1), name="Ab")
        data = metadata.serialized
        assert data[0] == Key.METADATA_V1
        assert data[1:33] == bytes(make_pubkey(2))
        assert data[33:65] == bytes(make_pubkey(1))
        assert data[65:71] == b"\x02\x00\x00\x00Ab"

    def test_older_account_without_trailing_fields(self) -> None:
        """Test that an account ending after is_mutable decodes the rest as None."""
        metadata = Metadata(
            update_authority=make_pubkey(2),
            mint=make_pubkey(1),
            name="Old",
            symbol="OLD",
            uri="",
            seller_fee_basis_points=0,
        )
        truncated = metadata.serialized[:-TRAILING_OPTIONS]
        decoded = Metadata.from_bytes(truncated)
        assert decoded == metadata
        assert decoded.token_standard is None
        assert decoded.programmable_config is None

    def test_zero_padded_account(self) -> None:
        """Test that zero padding after the last field is ignored."""
        metadata = make_metadata(make_pubkey(1))
        assert Metadata.from_bytes(metadata.serialized + bytes(64)) == metadata

    def test_data_view(self) -> None:
        """Test the Data view of the mutable fields."""
        metadata = make_metadata(make_pubkey(1))
        assert metadata.data.name == metadata.name
        assert metadata.data.creators == metadata.creators

    def test_key_mismatch(self) -> None:
        """Test that another account type is rejected by key."""
        data = make_master_edition().serialized
        with pytest.raises(
            AccountKeyMismatchError,
            match="Expected account key METADATA_V1, got MASTER_EDITION_V2",
        ):
            Metadata.from_bytes(data)

    def test_unknown_token_standard(self) -> None:
        """Test that an out of range token standard is rejected."""
        metadata = make_metadata(make_pubkey(1), token_standard=None)
        data = bytearray(metadata.serialized)
        # Token standard tag sits before Some(collection) and three None tags.
        offset = len(data) - 3 - (1 + 1 + 32) - 1
        assert data[offset] == 0
        data[offset : offset + 1] = b"\x01\x09"
        with pytest.raises(UnknownVariantError, match="TokenStandard discriminator: 9"):
            Metadata.from_bytes(bytes(data))

    def test_truncated(self) -> None:
        """Test that a cut-off required field raises an underrun."""
        data = make_metadata(make_pubkey(1)).serialized[:40]
        with pytest.raises(BufferUnderrunError):
            Metadata.from_bytes(data)


class TestEditions:
    """Tests for edition accounts."""

    def test_master_edition_unlimited(self) -> None:
        """Test that an absent max supply means unlimited prints."""
        edition = make_master_edition(max_supply=None)
        assert edition.serialized == bytes([Key.MASTER_EDITION_V2]) + bytes(8) + b"\x00"
        assert MasterEdition.from_bytes(edition.serialized).max_supply is None

    def test_master_edition_v1_key_accepted(self) -> None:
        """Test that first-generation master editions still decode."""
        data = bytes([Key.MASTER_EDITION_V1]) + (3).to_bytes(8, "little") + b"\x00"
        decoded = MasterEdition.from_bytes(data)
        assert decoded.key is Key.MASTER_EDITION_V1
        assert decoded.supply == 3

    def test_print_edition(self) -> None:
        """Test the print edition layout."""
        edition = Edition(parent=make_pubkey(5), edition=42)
        data = edition.serialized
        assert len(data) == 1 + 32 + 8
        assert Edition.from_bytes(data) == edition

    def test_print_edition_rejects_master(self) -> None:
        """Test that master edition data is not a print edition."""
        with pytest.raises(AccountKeyMismatchError, match="EDITION_V1"):
            Edition.from_bytes(make_master_edition().serialized)

    @pytest.mark.parametrize(("edition", "taken"), [(0, True), (1, False), (248, True)])
    def test_edition_marker_taken(self, edition: int, taken: bool) -> None:
        """Test the first-bit-of-first-byte ledger position."""
        marker = EditionMarker(ledger=b"\x80" + bytes(30))
        assert marker.edition_taken(edition) is taken

    def test_edition_marker_decode(self) -> None:
        """Test the fixed ledger width."""
        marker = EditionMarker(ledger=bytes(range(31)))
        assert len(marker.serialized) == 32
        assert EditionMarker.from_bytes(marker.serialized) == marker

    def test_edition_marker_v2(self) -> None:
        """Test the growable ledger."""
        marker = EditionMarkerV2(ledger=b"\x00\x80")
        decoded = EditionMarkerV2.from_bytes(marker.serialized)
        assert decoded == marker
        assert decoded.edition_taken(8) is True
        assert decoded.edition_taken(9) is False
        assert decoded.edition_taken(100) is False


class TestRecords:
    """Tests for token and delegate records."""

    def test_token_record(self) -> None:
        """Test a delegated, locked token record."""
        record = TokenRecord(
            bump=253,
            state=TokenState.LOCKED,
            rule_set_revision=2,
            delegate=make_pubkey(4),
            delegate_role=TokenDelegateRole.STAKING,
            locked_transfer=make_pubkey(6),
        )
        assert TokenRecord.from_bytes(record.serialized) == record

    def test_token_record_without_locked_transfer(self) -> None:
        """Test that older token records end before locked_transfer."""
        record = TokenRecord(bump=255)
        data = record.serialized[:-1]
        assert TokenRecord.from_bytes(data) == record

    def test_metadata_delegate_record(self) -> None:
        """Test the fixed-size metadata delegate record."""
        record = MetadataDelegateRecord(
            bump=1,
            mint=make_pubkey(1),
            delegate=make_pubkey(4),
            update_authority=make_pubkey(2),
        )
        assert len(record.serialized) == 98
        assert MetadataDelegateRecord.from_bytes(record.serialized) == record

    def test_use_authority_record(self) -> None:
        """Test the use authority record layout."""
        record = UseAuthorityRecord(allowed_uses=10, bump=7)
        assert UseAuthorityRecord.from_bytes(record.serialized) == record

    def test_token_owned_escrow_creator(self) -> None:
        """Test a creator-owned escrow."""
        escrow = TokenOwnedEscrow(
            base_token=make_pubkey(1),
            authority=EscrowAuthority.from_creator(make_pubkey(2)),
            bump=250,
        )
        assert TokenOwnedEscrow.from_bytes(escrow.serialized) == escrow


class TestUnions:
    """Tests for tagged unions."""

    def test_collection_details_v1(self) -> None:
        """Test the sized collection variant."""
        data = _write(CollectionDetails.v1(3), CollectionDetails.write)
        assert data == b"\x00" + (3).to_bytes(8, "little")

    def test_collection_details_v2(self) -> None:
        """Test the padded variant."""
        details = CollectionDetails.read(ByteReader(b"\x01" + bytes(8)))
        assert details.kind is CollectionDetailsKind.V2

    def test_print_supply(self) -> None:
        """Test each print supply variant."""
        assert _write(PrintSupply.zero(), PrintSupply.write) == b"\x00"
        assert _write(PrintSupply.unlimited(), PrintSupply.write) == b"\x02"
        assert _write(PrintSupply.limited(5), PrintSupply.write) == (
            b"\x01" + (5).to_bytes(8, "little")
        )

    def test_limited_print_supply_requires_limit(self) -> None:
        """Test that a limited supply without a limit cannot be encoded."""
        with pytest.raises(EncodingRangeError, match="requires a limit"):
            _write(PrintSupply(PrintSupplyKind.LIMITED), PrintSupply.write)

    def test_toggle(self) -> None:
        """Test toggle variants around a collection value."""
        collection = Collection(verified=False, key=make_pubkey(9))
        w = ByteWriter()
        Toggle.none().write(w, Collection.write)
        Toggle.clear().write(w, Collection.write)
        Toggle.set(collection).write(w, Collection.write)
        assert w.to_bytes() == b"\x00\x01\x02\x00" + bytes(make_pubkey(9))

        r = ByteReader(w.to_bytes())
        assert Toggle.read(r, Collection.read) == Toggle.none()
        assert Toggle.read(r, Collection.read) == Toggle.clear()
        assert Toggle.read(r, Collection.read).value == collection


class TestAuthorizationData:
    """Tests for authorization payloads."""

    def test_number_payload(self) -> None:
        """Test a single-entry payload layout."""
        data = AuthorizationData(Payload({"amount": PayloadType.number(1)}))
        assert data.serialized == (
            b"\x01\x00\x00\x00"
            + b"\x06\x00\x00\x00amount"
            + b"\x03"
            + (1).to_bytes(8, "little")
        )

    def test_payload_decode(self) -> None:
        """Test that mixed payload types decode back."""
        payload = Payload(
            {
                "destination": PayloadType.pubkey(make_pubkey(3)),
                "source_seeds": PayloadType.seeds([b"a", b"bc"]),
            }
        )
        decoded = AuthorizationData.read(
            ByteReader(AuthorizationData(payload).serialized)
        )
        assert dict(decoded.payload.map) == dict(payload.map)


class TestSplAccounts:
    """Tests for SPL mint and token account layouts."""

    def test_mint_size(self) -> None:
        """Test the base mint layout size."""
        mint = make_mint(supply=1_000, decimals=6)
        assert len(mint.serialized) == MINT_SIZE
        assert Mint.from_bytes(mint.serialized) == mint

    def test_mint_without_authorities(self) -> None:
        """Test that absent COption authorities decode as None."""
        mint = Mint(supply=0, decimals=0)
        decoded = Mint.from_bytes(mint.serialized)
        assert decoded.mint_authority is None
        assert decoded.freeze_authority is None

    def test_token_2022_extensions_ignored(self) -> None:
        """Test that bytes after the base layout are ignored."""
        mint = make_mint()
        assert Mint.from_bytes(mint.serialized + b"\x01" + bytes(83)) == mint

    def test_token_account_size(self) -> None:
        """Test the token account layout size."""
        account = make_token_account(make_pubkey(1), make_pubkey(3), amount=5)
        assert len(account.serialized) == TOKEN_ACCOUNT_SIZE
        assert TokenAccount.from_bytes(account.serialized) == account

    def test_frozen_token_account(self) -> None:
        """Test account state decoding."""
        account = TokenAccount(
            mint=make_pubkey(1),
            owner=make_pubkey(3),
            amount=1,
            state=AccountState.FROZEN,
            delegate=make_pubkey(4),
            delegated_amount=1,
        )
        decoded = TokenAccount.from_bytes(account.serialized)
        assert decoded.state is AccountState.FROZEN
        assert decoded.delegate == make_pubkey(4)


class TestAccountKey:
    """Tests for account_key."""

    def test_known_key(self) -> None:
        """Test reading the discriminator."""
        assert account_key(make_metadata(make_pubkey(1)).serialized) is Key.METADATA_V1

    def test_empty(self) -> None:
        """Test that empty data has no key."""
        with pytest.raises(BufferUnderrunError):
            account_key(b"")

    def test_unknown(self) -> None:
        """Test that an unknown discriminator is rejected."""
        with pytest.raises(UnknownVariantError):
            account_key(b"\x63")
