"""
Instruction discriminators and argument layouts.

Instruction data starts with the instruction discriminator (one byte). The
versioned instructions follow it with a second byte selecting the argument
variant, then the variant fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from solders.pubkey import Pubkey

from ..codec import ByteWriter
from ..enums import TokenStandard
from ..errors import EncodingRangeError
from ..models import (
    AuthorizationData,
    Collection,
    CollectionDetails,
    Creator,
    Data,
    PrintSupply,
    Toggle,
    Uses,
    write_authorization_data,
)
from ..validation import validate_data_fields


class InstructionDiscriminator(IntEnum):
    VERIFY_COLLECTION = 18
    APPROVE_COLLECTION_AUTHORITY = 23
    REVOKE_COLLECTION_AUTHORITY = 24
    FREEZE_DELEGATED_ACCOUNT = 26
    THAW_DELEGATED_ACCOUNT = 27
    CREATE_ESCROW_ACCOUNT = 38
    CLOSE_ESCROW_ACCOUNT = 39
    TRANSFER_OUT_OF_ESCROW = 40
    BURN = 41
    CREATE = 42
    MINT = 43
    DELEGATE = 44
    REVOKE = 45
    LOCK = 46
    UNLOCK = 47
    MIGRATE = 48
    TRANSFER = 49
    UPDATE = 50
    USE = 51
    VERIFY = 52
    UNVERIFY = 53
    COLLECT = 54
    PRINT = 55
    RESIZE = 56
    CLOSE_ACCOUNTS = 57


class DelegateArgsKind(IntEnum):
    COLLECTION_V1 = 0
    SALE_V1 = 1
    TRANSFER_V1 = 2
    DATA_V1 = 3
    UTILITY_V1 = 4
    STAKING_V1 = 5
    STANDARD_V1 = 6
    LOCKED_TRANSFER_V1 = 7
    PROGRAMMABLE_CONFIG_V1 = 8
    AUTHORITY_ITEM_V1 = 9
    DATA_ITEM_V1 = 10
    COLLECTION_ITEM_V1 = 11
    PROGRAMMABLE_CONFIG_ITEM_V1 = 12
    PRINT_DELEGATE_V1 = 13


class RevokeArgsKind(IntEnum):
    COLLECTION_V1 = 0
    SALE_V1 = 1
    TRANSFER_V1 = 2
    DATA_V1 = 3
    UTILITY_V1 = 4
    STAKING_V1 = 5
    STANDARD_V1 = 6
    LOCKED_TRANSFER_V1 = 7
    PROGRAMMABLE_CONFIG_V1 = 8
    MIGRATION_V1 = 9
    AUTHORITY_ITEM_V1 = 10
    DATA_ITEM_V1 = 11
    COLLECTION_ITEM_V1 = 12
    PROGRAMMABLE_CONFIG_ITEM_V1 = 13
    PRINT_DELEGATE_V1 = 14


class UpdateArgsKind(IntEnum):
    V1 = 0
    AS_UPDATE_AUTHORITY_V2 = 1
    AS_AUTHORITY_ITEM_DELEGATE_V2 = 2
    AS_COLLECTION_DELEGATE_V2 = 3
    AS_DATA_DELEGATE_V2 = 4
    AS_PROGRAMMABLE_CONFIG_DELEGATE_V2 = 5
    AS_DATA_ITEM_DELEGATE_V2 = 6
    AS_COLLECTION_ITEM_DELEGATE_V2 = 7
    AS_PROGRAMMABLE_CONFIG_ITEM_DELEGATE_V2 = 8


class VerificationArgsKind(IntEnum):
    CREATOR_V1 = 0
    COLLECTION_V1 = 1


class PrintArgsKind(IntEnum):
    V1 = 0
    V2 = 1


# Delegate kinds whose args are `amount` + Option<AuthorizationData>.
AMOUNT_DELEGATES = frozenset(
    {
        DelegateArgsKind.SALE_V1,
        DelegateArgsKind.TRANSFER_V1,
        DelegateArgsKind.UTILITY_V1,
        DelegateArgsKind.STAKING_V1,
    }
)


def instruction_data(
    discriminator: InstructionDiscriminator, variant: int | None = None
) -> ByteWriter:
    """Start an instruction data buffer with its discriminator byte(s)."""
    w = ByteWriter().write_u8(discriminator)
    if variant is not None:
        w.write_u8(variant)
    return w


def _write_creators(w: ByteWriter, creators: tuple[Creator, ...]) -> None:
    w.write_vec(creators, Creator.write)


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class CreateV1Args:
    name: str
    uri: str
    seller_fee_basis_points: int
    symbol: str = ""
    creators: tuple[Creator, ...] | None = None
    primary_sale_happened: bool = False
    is_mutable: bool = True
    token_standard: TokenStandard = TokenStandard.NON_FUNGIBLE
    collection: Collection | None = None
    uses: Uses | None = None
    collection_details: CollectionDetails | None = None
    rule_set: Pubkey | None = None
    decimals: int | None = None
    print_supply: PrintSupply | None = None

    def write(self, w: ByteWriter) -> None:
        validate_data_fields(
            name=self.name,
            symbol=self.symbol,
            uri=self.uri,
            seller_fee_basis_points=self.seller_fee_basis_points,
            creators=self.creators,
        )
        w.write_string(self.name).write_string(self.symbol).write_string(self.uri)
        w.write_u16(self.seller_fee_basis_points)
        w.write_option(self.creators, _write_creators)
        w.write_bool(self.primary_sale_happened).write_bool(self.is_mutable)
        w.write_enum(self.token_standard)
        w.write_option(self.collection, Collection.write)
        w.write_option(self.uses, Uses.write)
        w.write_option(self.collection_details, CollectionDetails.write)
        w.write_option(self.rule_set, ByteWriter.write_pubkey)
        w.write_option(self.decimals, ByteWriter.write_u8)
        w.write_option(self.print_supply, PrintSupply.write)

    @property
    def serialized(self) -> bytes:
        w = instruction_data(InstructionDiscriminator.CREATE, 0)
        self.write(w)
        return w.to_bytes()


# ---------------------------------------------------------------------------
# Update
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class UpdateArgs:
    """
    Superset of the update argument fields.

    Each variant only serializes the fields it declares, in its own order; the
    others are ignored. Toggles default to "leave unchanged".
    """

    kind: UpdateArgsKind = UpdateArgsKind.V1
    new_update_authority: Pubkey | None = None
    data: Data | None = None
    primary_sale_happened: bool | None = None
    is_mutable: bool | None = None
    collection: Toggle[Collection] = field(default_factory=Toggle)
    collection_details: Toggle[CollectionDetails] = field(default_factory=Toggle)
    uses: Toggle[Uses] = field(default_factory=Toggle)
    rule_set: Toggle[Pubkey] = field(default_factory=Toggle)
    token_standard: TokenStandard | None = None
    authorization_data: AuthorizationData | None = None

    def _write_full(self, w: ByteWriter, *, with_token_standard: bool) -> None:
        w.write_option(self.new_update_authority, ByteWriter.write_pubkey)
        w.write_option(self.data, Data.write)
        w.write_option(self.primary_sale_happened, ByteWriter.write_bool)
        w.write_option(self.is_mutable, ByteWriter.write_bool)
        self.collection.write(w, Collection.write)
        self.collection_details.write(w, CollectionDetails.write)
        self.uses.write(w, Uses.write)
        self.rule_set.write(w, ByteWriter.write_pubkey)
        if with_token_standard:
            w.write_option(self.token_standard, ByteWriter.write_enum)
        write_authorization_data(w, self.authorization_data)

    def write(self, w: ByteWriter) -> None:
        kind = self.kind
        if self.data is not None:
            self.data.validate()
        if kind == UpdateArgsKind.V1:
            self._write_full(w, with_token_standard=False)
            return
        if kind == UpdateArgsKind.AS_UPDATE_AUTHORITY_V2:
            self._write_full(w, with_token_standard=True)
            return
        if kind == UpdateArgsKind.AS_AUTHORITY_ITEM_DELEGATE_V2:
            w.write_option(self.new_update_authority, ByteWriter.write_pubkey)
            w.write_option(self.primary_sale_happened, ByteWriter.write_bool)
            w.write_option(self.is_mutable, ByteWriter.write_bool)
            w.write_option(self.token_standard, ByteWriter.write_enum)
        elif kind in (
            UpdateArgsKind.AS_COLLECTION_DELEGATE_V2,
            UpdateArgsKind.AS_COLLECTION_ITEM_DELEGATE_V2,
        ):
            self.collection.write(w, Collection.write)
        elif kind in (
            UpdateArgsKind.AS_DATA_DELEGATE_V2,
            UpdateArgsKind.AS_DATA_ITEM_DELEGATE_V2,
        ):
            w.write_option(self.data, Data.write)
        elif kind in (
            UpdateArgsKind.AS_PROGRAMMABLE_CONFIG_DELEGATE_V2,
            UpdateArgsKind.AS_PROGRAMMABLE_CONFIG_ITEM_DELEGATE_V2,
        ):
            self.rule_set.write(w, ByteWriter.write_pubkey)
        else:
            raise EncodingRangeError(f"Unsupported update variant: {kind!r}")
        write_authorization_data(w, self.authorization_data)

    @property
    def serialized(self) -> bytes:
        w = instruction_data(InstructionDiscriminator.UPDATE, self.kind)
        self.write(w)
        return w.to_bytes()


# ---------------------------------------------------------------------------
# Delegate / revoke
# ---------------------------------------------------------------------------
def delegate_data(
    kind: DelegateArgsKind,
    *,
    amount: int = 1,
    locked_address: Pubkey | None = None,
    authorization_data: AuthorizationData | None = None,
) -> bytes:
    """Serialize `DelegateArgs` for `kind`, prefixed by the delegate discriminator."""
    w = instruction_data(InstructionDiscriminator.DELEGATE, kind)
    if kind in AMOUNT_DELEGATES:
        w.write_u64(amount)
    elif kind == DelegateArgsKind.STANDARD_V1:
        # Standard delegates are SPL Token delegates: no authorization data.
        w.write_u64(amount)
        return w.to_bytes()
    elif kind == DelegateArgsKind.LOCKED_TRANSFER_V1:
        if locked_address is None:
            raise EncodingRangeError("Locked transfer delegate requires locked_address")
        w.write_u64(amount).write_pubkey(locked_address)
    write_authorization_data(w, authorization_data)
    return w.to_bytes()


def revoke_data(kind: RevokeArgsKind) -> bytes:
    return instruction_data(InstructionDiscriminator.REVOKE, kind).to_bytes()


# ---------------------------------------------------------------------------
# Token operations
# ---------------------------------------------------------------------------
def amount_data(
    discriminator: InstructionDiscriminator,
    amount: int,
    authorization_data: AuthorizationData | None = None,
    *,
    with_authorization_data: bool = True,
) -> bytes:
    """V1 args made of an `amount` and, for most instructions, authorization data."""
    w = instruction_data(discriminator, 0).write_u64(amount)
    if with_authorization_data:
        write_authorization_data(w, authorization_data)
    return w.to_bytes()


def authorization_only_data(
    discriminator: InstructionDiscriminator,
    authorization_data: AuthorizationData | None = None,
) -> bytes:
    w = instruction_data(discriminator, 0)
    write_authorization_data(w, authorization_data)
    return w.to_bytes()


def verification_data(
    discriminator: InstructionDiscriminator, kind: VerificationArgsKind
) -> bytes:
    return instruction_data(discriminator, kind).to_bytes()


def print_data(kind: PrintArgsKind, edition: int) -> bytes:
    w = instruction_data(InstructionDiscriminator.PRINT, kind)
    return w.write_u64(edition).to_bytes()
