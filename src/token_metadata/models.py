from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Generic, TypeVar

from solders.pubkey import Pubkey

from .codec import ByteReader, ByteWriter, decode_enum
from .constants import EDITION_MARKER_LEDGER_SIZE, MINT_SIZE, TOKEN_ACCOUNT_SIZE
from .enums import (
    AccountState,
    Key,
    TokenDelegateRole,
    TokenStandard,
    TokenState,
    UseMethod,
)
from .errors import AccountKeyMismatchError, BufferUnderrunError, EncodingRangeError
from .pda import edition_marker_bit
from .validation import validate_data_fields

T = TypeVar("T")


def _read_key(r: ByteReader, *expected: Key) -> Key:
    key = r.read_enum(Key)
    if key not in expected:
        names = ", ".join(k.name for k in expected)
        raise AccountKeyMismatchError(f"Expected account key {names}, got {key.name}")
    return key


def _write_option_enum(w: ByteWriter, value: IntEnum | None) -> None:
    w.write_option(value, ByteWriter.write_enum)


# ---------------------------------------------------------------------------
# Nested structs
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class Creator:
    address: Pubkey
    verified: bool
    share: int

    def write(self, w: ByteWriter) -> None:
        w.write_pubkey(self.address).write_bool(self.verified).write_u8(self.share)

    @staticmethod
    def read(r: ByteReader) -> Creator:
        return Creator(
            address=r.read_pubkey(), verified=r.read_bool(), share=r.read_u8()
        )


@dataclass(frozen=True, slots=True)
class Collection:
    verified: bool
    key: Pubkey

    def write(self, w: ByteWriter) -> None:
        w.write_bool(self.verified).write_pubkey(self.key)

    @staticmethod
    def read(r: ByteReader) -> Collection:
        return Collection(verified=r.read_bool(), key=r.read_pubkey())


@dataclass(frozen=True, slots=True)
class Uses:
    use_method: UseMethod
    remaining: int
    total: int

    def write(self, w: ByteWriter) -> None:
        w.write_enum(self.use_method).write_u64(self.remaining).write_u64(self.total)

    @staticmethod
    def read(r: ByteReader) -> Uses:
        return Uses(
            use_method=r.read_enum(UseMethod),
            remaining=r.read_u64(),
            total=r.read_u64(),
        )


@dataclass(frozen=True, slots=True)
class Data:
    """Mutable metadata fields, as accepted by the update instructions."""

    name: str
    symbol: str
    uri: str
    seller_fee_basis_points: int
    creators: tuple[Creator, ...] | None = None

    def write(self, w: ByteWriter) -> None:
        w.write_string(self.name).write_string(self.symbol).write_string(self.uri)
        w.write_u16(self.seller_fee_basis_points)
        w.write_option(
            self.creators, lambda w_, cs: w_.write_vec(cs, Creator.write)
        )

    def validate(self) -> None:
        validate_data_fields(
            name=self.name,
            symbol=self.symbol,
            uri=self.uri,
            seller_fee_basis_points=self.seller_fee_basis_points,
            creators=self.creators,
        )

    @staticmethod
    def read(r: ByteReader) -> Data:
        name = r.read_string()
        symbol = r.read_string()
        uri = r.read_string()
        fee = r.read_u16()
        creators = r.read_option(lambda r_: tuple(r_.read_vec(Creator.read)))
        return Data(
            name=name,
            symbol=symbol,
            uri=uri,
            seller_fee_basis_points=fee,
            creators=creators,
        )


# ---------------------------------------------------------------------------
# Tagged unions
# ---------------------------------------------------------------------------
class CollectionDetailsKind(IntEnum):
    V1 = 0
    V2 = 1


@dataclass(frozen=True, slots=True)
class CollectionDetails:
    """Sized collection marker. V1 tracks `size`; V2 carries 8 reserved bytes."""

    kind: CollectionDetailsKind
    size: int = 0
    padding: bytes = bytes(8)

    @classmethod
    def v1(cls, size: int) -> CollectionDetails:
        return cls(kind=CollectionDetailsKind.V1, size=size)

    @classmethod
    def v2(cls, padding: bytes = bytes(8)) -> CollectionDetails:
        return cls(kind=CollectionDetailsKind.V2, padding=padding)

    def write(self, w: ByteWriter) -> None:
        w.write_enum(self.kind)
        if self.kind == CollectionDetailsKind.V1:
            w.write_u64(self.size)
        else:
            w.write_fixed(self.padding, 8)

    @staticmethod
    def read(r: ByteReader) -> CollectionDetails:
        kind = r.read_enum(CollectionDetailsKind)
        if kind == CollectionDetailsKind.V1:
            return CollectionDetails.v1(r.read_u64())
        return CollectionDetails.v2(r.read(8))


class ProgrammableConfigKind(IntEnum):
    V1 = 0


@dataclass(frozen=True, slots=True)
class ProgrammableConfig:
    rule_set: Pubkey | None = None
    kind: ProgrammableConfigKind = ProgrammableConfigKind.V1

    def write(self, w: ByteWriter) -> None:
        w.write_enum(self.kind).write_option(self.rule_set, ByteWriter.write_pubkey)

    @staticmethod
    def read(r: ByteReader) -> ProgrammableConfig:
        kind = r.read_enum(ProgrammableConfigKind)
        return ProgrammableConfig(
            rule_set=r.read_option(ByteReader.read_pubkey), kind=kind
        )


class PrintSupplyKind(IntEnum):
    ZERO = 0
    LIMITED = 1
    UNLIMITED = 2


@dataclass(frozen=True, slots=True)
class PrintSupply:
    kind: PrintSupplyKind
    limit: int | None = None

    @classmethod
    def zero(cls) -> PrintSupply:
        return cls(PrintSupplyKind.ZERO)

    @classmethod
    def limited(cls, limit: int) -> PrintSupply:
        return cls(PrintSupplyKind.LIMITED, limit)

    @classmethod
    def unlimited(cls) -> PrintSupply:
        return cls(PrintSupplyKind.UNLIMITED)

    def write(self, w: ByteWriter) -> None:
        w.write_enum(self.kind)
        if self.kind == PrintSupplyKind.LIMITED:
            if self.limit is None:
                raise EncodingRangeError("Limited print supply requires a limit")
            w.write_u64(self.limit)

    @staticmethod
    def read(r: ByteReader) -> PrintSupply:
        kind = r.read_enum(PrintSupplyKind)
        if kind == PrintSupplyKind.LIMITED:
            return PrintSupply.limited(r.read_u64())
        return PrintSupply(kind)


class EscrowAuthorityKind(IntEnum):
    TOKEN_OWNER = 0
    CREATOR = 1


@dataclass(frozen=True, slots=True)
class EscrowAuthority:
    kind: EscrowAuthorityKind
    creator: Pubkey | None = None

    @classmethod
    def token_owner(cls) -> EscrowAuthority:
        return cls(EscrowAuthorityKind.TOKEN_OWNER)

    @classmethod
    def from_creator(cls, creator: Pubkey) -> EscrowAuthority:
        return cls(EscrowAuthorityKind.CREATOR, creator)

    def write(self, w: ByteWriter) -> None:
        w.write_enum(self.kind)
        if self.kind == EscrowAuthorityKind.CREATOR:
            if self.creator is None:
                raise EncodingRangeError("Creator escrow authority requires a creator")
            w.write_pubkey(self.creator)

    @staticmethod
    def read(r: ByteReader) -> EscrowAuthority:
        kind = r.read_enum(EscrowAuthorityKind)
        if kind == EscrowAuthorityKind.CREATOR:
            return EscrowAuthority.from_creator(r.read_pubkey())
        return EscrowAuthority.token_owner()


class ToggleKind(IntEnum):
    NONE = 0
    CLEAR = 1
    SET = 2


@dataclass(frozen=True, slots=True)
class Toggle(Generic[T]):
    """
    Three-way update of an optional field: leave it (NONE), clear it, or set it.

    Used for the collection, collection details, uses and rule set fields of
    the update instructions.
    """

    kind: ToggleKind = ToggleKind.NONE
    value: T | None = None

    @classmethod
    def none(cls) -> Toggle[T]:
        return cls(ToggleKind.NONE)

    @classmethod
    def clear(cls) -> Toggle[T]:
        return cls(ToggleKind.CLEAR)

    @classmethod
    def set(cls, value: T) -> Toggle[T]:
        return cls(ToggleKind.SET, value)

    def write(self, w: ByteWriter, write_item: Callable[[ByteWriter, T], object]) -> None:
        w.write_enum(self.kind)
        if self.kind == ToggleKind.SET:
            if self.value is None:
                raise EncodingRangeError("Toggle.set requires a value")
            write_item(w, self.value)

    @staticmethod
    def read(r: ByteReader, read_item: Callable[[ByteReader], T]) -> Toggle[T]:
        kind = r.read_enum(ToggleKind)
        if kind == ToggleKind.SET:
            return Toggle(kind, read_item(r))
        return Toggle(kind)


# ---------------------------------------------------------------------------
# Authorization data (token auth rules payload)
# ---------------------------------------------------------------------------
class PayloadTypeKind(IntEnum):
    PUBKEY = 0
    SEEDS = 1
    MERKLE_PROOF = 2
    NUMBER = 3


@dataclass(frozen=True, slots=True)
class PayloadType:
    kind: PayloadTypeKind
    value: Pubkey | tuple[bytes, ...] | int

    @classmethod
    def pubkey(cls, value: Pubkey) -> PayloadType:
        return cls(PayloadTypeKind.PUBKEY, value)

    @classmethod
    def seeds(cls, seeds: list[bytes] | tuple[bytes, ...]) -> PayloadType:
        return cls(PayloadTypeKind.SEEDS, tuple(seeds))

    @classmethod
    def merkle_proof(cls, leaves: list[bytes] | tuple[bytes, ...]) -> PayloadType:
        return cls(PayloadTypeKind.MERKLE_PROOF, tuple(leaves))

    @classmethod
    def number(cls, value: int) -> PayloadType:
        return cls(PayloadTypeKind.NUMBER, value)

    def write(self, w: ByteWriter) -> None:
        w.write_enum(self.kind)
        if self.kind == PayloadTypeKind.PUBKEY:
            w.write_pubkey(self.value)  # type: ignore[arg-type]
        elif self.kind == PayloadTypeKind.SEEDS:
            w.write_vec(self.value, ByteWriter.write_bytes)  # type: ignore[arg-type]
        elif self.kind == PayloadTypeKind.MERKLE_PROOF:
            w.write_vec(
                self.value,  # type: ignore[arg-type]
                lambda w_, leaf: w_.write_fixed(leaf, 32),
            )
        else:
            w.write_u64(self.value)  # type: ignore[arg-type]

    @staticmethod
    def read(r: ByteReader) -> PayloadType:
        kind = r.read_enum(PayloadTypeKind)
        if kind == PayloadTypeKind.PUBKEY:
            return PayloadType.pubkey(r.read_pubkey())
        if kind == PayloadTypeKind.SEEDS:
            return PayloadType.seeds(r.read_vec(ByteReader.read_bytes))
        if kind == PayloadTypeKind.MERKLE_PROOF:
            return PayloadType.merkle_proof(r.read_vec(lambda r_: r_.read(32)))
        return PayloadType.number(r.read_u64())


@dataclass(frozen=True, slots=True)
class Payload:
    """Map of payload key name (see `seeds.payload_key_name`) to value."""

    map: Mapping[str, PayloadType] = field(default_factory=dict)

    def write(self, w: ByteWriter) -> None:
        w.write_map(self.map, ByteWriter.write_string, PayloadType.write)

    @staticmethod
    def read(r: ByteReader) -> Payload:
        return Payload(r.read_map(ByteReader.read_string, PayloadType.read))


@dataclass(frozen=True, slots=True)
class AuthorizationData:
    payload: Payload = field(default_factory=Payload)

    def write(self, w: ByteWriter) -> None:
        self.payload.write(w)

    @staticmethod
    def read(r: ByteReader) -> AuthorizationData:
        return AuthorizationData(Payload.read(r))

    @property
    def serialized(self) -> bytes:
        w = ByteWriter()
        self.write(w)
        return w.to_bytes()


def write_authorization_data(w: ByteWriter, value: AuthorizationData | None) -> None:
    w.write_option(value, AuthorizationData.write)


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------
class _Account:
    """Shared `serialized` / `from_bytes` plumbing for account layouts."""

    __slots__ = ()

    def write(self, w: ByteWriter) -> None:
        raise NotImplementedError

    @property
    def serialized(self) -> bytes:
        w = ByteWriter()
        self.write(w)
        return w.to_bytes()


@dataclass(frozen=True, slots=True)
class Metadata(_Account):
    """
    Metadata account of a mint.

    The fields from `edition_nonce` onwards were appended by successive program
    versions. Older accounts end (or are zero padded) before them and decode
    them as None.
    """

    update_authority: Pubkey
    mint: Pubkey
    name: str
    symbol: str
    uri: str
    seller_fee_basis_points: int
    creators: tuple[Creator, ...] | None = None
    primary_sale_happened: bool = False
    is_mutable: bool = True
    edition_nonce: int | None = None
    token_standard: TokenStandard | None = None
    collection: Collection | None = None
    uses: Uses | None = None
    collection_details: CollectionDetails | None = None
    programmable_config: ProgrammableConfig | None = None
    key: Key = Key.METADATA_V1

    @property
    def data(self) -> Data:
        return Data(
            name=self.name,
            symbol=self.symbol,
            uri=self.uri,
            seller_fee_basis_points=self.seller_fee_basis_points,
            creators=self.creators,
        )

    def write(self, w: ByteWriter) -> None:
        w.write_enum(self.key)
        w.write_pubkey(self.update_authority).write_pubkey(self.mint)
        self.data.write(w)
        w.write_bool(self.primary_sale_happened).write_bool(self.is_mutable)
        w.write_option(self.edition_nonce, ByteWriter.write_u8)
        _write_option_enum(w, self.token_standard)
        w.write_option(self.collection, Collection.write)
        w.write_option(self.uses, Uses.write)
        w.write_option(self.collection_details, CollectionDetails.write)
        w.write_option(self.programmable_config, ProgrammableConfig.write)

    @staticmethod
    def from_bytes(data: bytes) -> Metadata:
        r = ByteReader(data)
        key = _read_key(r, Key.METADATA_V1)
        update_authority = r.read_pubkey()
        mint = r.read_pubkey()
        d = Data.read(r)
        primary_sale_happened = r.read_bool()
        is_mutable = r.read_bool()
        edition_nonce = r.read_trailing_option(ByteReader.read_u8)
        token_standard = r.read_trailing_option(lambda r_: r_.read_enum(TokenStandard))
        collection = r.read_trailing_option(Collection.read)
        uses = r.read_trailing_option(Uses.read)
        collection_details = r.read_trailing_option(CollectionDetails.read)
        programmable_config = r.read_trailing_option(ProgrammableConfig.read)
        return Metadata(
            key=key,
            update_authority=update_authority,
            mint=mint,
            name=d.name,
            symbol=d.symbol,
            uri=d.uri,
            seller_fee_basis_points=d.seller_fee_basis_points,
            creators=d.creators,
            primary_sale_happened=primary_sale_happened,
            is_mutable=is_mutable,
            edition_nonce=edition_nonce,
            token_standard=token_standard,
            collection=collection,
            uses=uses,
            collection_details=collection_details,
            programmable_config=programmable_config,
        )


@dataclass(frozen=True, slots=True)
class MasterEdition(_Account):
    supply: int
    max_supply: int | None = None
    key: Key = Key.MASTER_EDITION_V2

    def write(self, w: ByteWriter) -> None:
        w.write_enum(self.key).write_u64(self.supply)
        w.write_option(self.max_supply, ByteWriter.write_u64)

    @staticmethod
    def from_bytes(data: bytes) -> MasterEdition:
        r = ByteReader(data)
        key = _read_key(r, Key.MASTER_EDITION_V1, Key.MASTER_EDITION_V2)
        supply = r.read_u64()
        max_supply = r.read_option(ByteReader.read_u64)
        return MasterEdition(supply=supply, max_supply=max_supply, key=key)


@dataclass(frozen=True, slots=True)
class Edition(_Account):
    """Print edition: `parent` is the master edition account it was printed from."""

    parent: Pubkey
    edition: int
    key: Key = Key.EDITION_V1

    def write(self, w: ByteWriter) -> None:
        w.write_enum(self.key).write_pubkey(self.parent).write_u64(self.edition)

    @staticmethod
    def from_bytes(data: bytes) -> Edition:
        r = ByteReader(data)
        key = _read_key(r, Key.EDITION_V1)
        return Edition(parent=r.read_pubkey(), edition=r.read_u64(), key=key)


@dataclass(frozen=True, slots=True)
class EditionMarker(_Account):
    ledger: bytes = bytes(EDITION_MARKER_LEDGER_SIZE)
    key: Key = Key.EDITION_MARKER

    def write(self, w: ByteWriter) -> None:
        w.write_enum(self.key).write_fixed(self.ledger, EDITION_MARKER_LEDGER_SIZE)

    @staticmethod
    def from_bytes(data: bytes) -> EditionMarker:
        r = ByteReader(data)
        key = _read_key(r, Key.EDITION_MARKER)
        return EditionMarker(ledger=r.read(EDITION_MARKER_LEDGER_SIZE), key=key)

    def edition_taken(self, edition_number: int) -> bool:
        """Whether `edition_number` is marked as printed in this ledger."""
        index, mask = edition_marker_bit(edition_number)
        return bool(self.ledger[index] & mask)


@dataclass(frozen=True, slots=True)
class EditionMarkerV2(_Account):
    """Growable edition ledger, one bit per edition starting at edition 0."""

    ledger: bytes = b""
    key: Key = Key.EDITION_MARKER_V2

    def write(self, w: ByteWriter) -> None:
        w.write_enum(self.key).write_bytes(self.ledger)

    @staticmethod
    def from_bytes(data: bytes) -> EditionMarkerV2:
        r = ByteReader(data)
        key = _read_key(r, Key.EDITION_MARKER_V2)
        return EditionMarkerV2(ledger=r.read_bytes(), key=key)

    def edition_taken(self, edition_number: int) -> bool:
        index, bit = divmod(edition_number, 8)
        if edition_number < 0 or index >= len(self.ledger):
            return False
        return bool(self.ledger[index] & (1 << (7 - bit)))


@dataclass(frozen=True, slots=True)
class TokenRecord(_Account):
    bump: int
    state: TokenState = TokenState.UNLOCKED
    rule_set_revision: int | None = None
    delegate: Pubkey | None = None
    delegate_role: TokenDelegateRole | None = None
    locked_transfer: Pubkey | None = None
    key: Key = Key.TOKEN_RECORD

    def write(self, w: ByteWriter) -> None:
        w.write_enum(self.key).write_u8(self.bump).write_enum(self.state)
        w.write_option(self.rule_set_revision, ByteWriter.write_u64)
        w.write_option(self.delegate, ByteWriter.write_pubkey)
        _write_option_enum(w, self.delegate_role)
        w.write_option(self.locked_transfer, ByteWriter.write_pubkey)

    @staticmethod
    def from_bytes(data: bytes) -> TokenRecord:
        r = ByteReader(data)
        key = _read_key(r, Key.TOKEN_RECORD)
        bump = r.read_u8()
        state = r.read_enum(TokenState)
        rule_set_revision = r.read_option(ByteReader.read_u64)
        delegate = r.read_option(ByteReader.read_pubkey)
        delegate_role = r.read_option(lambda r_: r_.read_enum(TokenDelegateRole))
        locked_transfer = r.read_trailing_option(ByteReader.read_pubkey)
        return TokenRecord(
            key=key,
            bump=bump,
            state=state,
            rule_set_revision=rule_set_revision,
            delegate=delegate,
            delegate_role=delegate_role,
            locked_transfer=locked_transfer,
        )


@dataclass(frozen=True, slots=True)
class MetadataDelegateRecord(_Account):
    bump: int
    mint: Pubkey
    delegate: Pubkey
    update_authority: Pubkey
    key: Key = Key.METADATA_DELEGATE

    def write(self, w: ByteWriter) -> None:
        w.write_enum(self.key).write_u8(self.bump)
        w.write_pubkey(self.mint).write_pubkey(self.delegate)
        w.write_pubkey(self.update_authority)

    @staticmethod
    def from_bytes(data: bytes) -> MetadataDelegateRecord:
        r = ByteReader(data)
        key = _read_key(r, Key.METADATA_DELEGATE)
        return MetadataDelegateRecord(
            key=key,
            bump=r.read_u8(),
            mint=r.read_pubkey(),
            delegate=r.read_pubkey(),
            update_authority=r.read_pubkey(),
        )


@dataclass(frozen=True, slots=True)
class HolderDelegateRecord(_Account):
    bump: int
    mint: Pubkey
    delegate: Pubkey
    update_authority: Pubkey
    key: Key = Key.HOLDER_DELEGATE

    def write(self, w: ByteWriter) -> None:
        w.write_enum(self.key).write_u8(self.bump)
        w.write_pubkey(self.mint).write_pubkey(self.delegate)
        w.write_pubkey(self.update_authority)

    @staticmethod
    def from_bytes(data: bytes) -> HolderDelegateRecord:
        r = ByteReader(data)
        key = _read_key(r, Key.HOLDER_DELEGATE)
        return HolderDelegateRecord(
            key=key,
            bump=r.read_u8(),
            mint=r.read_pubkey(),
            delegate=r.read_pubkey(),
            update_authority=r.read_pubkey(),
        )


@dataclass(frozen=True, slots=True)
class CollectionAuthorityRecord(_Account):
    bump: int
    update_authority: Pubkey | None = None
    key: Key = Key.COLLECTION_AUTHORITY_RECORD

    def write(self, w: ByteWriter) -> None:
        w.write_enum(self.key).write_u8(self.bump)
        w.write_option(self.update_authority, ByteWriter.write_pubkey)

    @staticmethod
    def from_bytes(data: bytes) -> CollectionAuthorityRecord:
        r = ByteReader(data)
        key = _read_key(r, Key.COLLECTION_AUTHORITY_RECORD)
        bump = r.read_u8()
        update_authority = r.read_trailing_option(ByteReader.read_pubkey)
        return CollectionAuthorityRecord(
            bump=bump, update_authority=update_authority, key=key
        )


@dataclass(frozen=True, slots=True)
class UseAuthorityRecord(_Account):
    allowed_uses: int
    bump: int
    key: Key = Key.USE_AUTHORITY_RECORD

    def write(self, w: ByteWriter) -> None:
        w.write_enum(self.key).write_u64(self.allowed_uses).write_u8(self.bump)

    @staticmethod
    def from_bytes(data: bytes) -> UseAuthorityRecord:
        r = ByteReader(data)
        key = _read_key(r, Key.USE_AUTHORITY_RECORD)
        return UseAuthorityRecord(
            allowed_uses=r.read_u64(), bump=r.read_u8(), key=key
        )


@dataclass(frozen=True, slots=True)
class TokenOwnedEscrow(_Account):
    base_token: Pubkey
    authority: EscrowAuthority
    bump: int
    key: Key = Key.TOKEN_OWNED_ESCROW

    def write(self, w: ByteWriter) -> None:
        w.write_enum(self.key).write_pubkey(self.base_token)
        self.authority.write(w)
        w.write_u8(self.bump)

    @staticmethod
    def from_bytes(data: bytes) -> TokenOwnedEscrow:
        r = ByteReader(data)
        key = _read_key(r, Key.TOKEN_OWNED_ESCROW)
        return TokenOwnedEscrow(
            key=key,
            base_token=r.read_pubkey(),
            authority=EscrowAuthority.read(r),
            bump=r.read_u8(),
        )


# ---------------------------------------------------------------------------
# SPL Token accounts
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class Mint(_Account):
    supply: int
    decimals: int
    is_initialized: bool = True
    mint_authority: Pubkey | None = None
    freeze_authority: Pubkey | None = None

    def write(self, w: ByteWriter) -> None:
        w.write_coption_pubkey(self.mint_authority)
        w.write_u64(self.supply).write_u8(self.decimals)
        w.write_bool(self.is_initialized)
        w.write_coption_pubkey(self.freeze_authority)

    @staticmethod
    def from_bytes(data: bytes) -> Mint:
        # Token-2022 mints carry extensions after the base layout.
        r = ByteReader(data[:MINT_SIZE])
        mint_authority = r.read_coption_pubkey()
        supply = r.read_u64()
        decimals = r.read_u8()
        is_initialized = r.read_bool()
        freeze_authority = r.read_coption_pubkey()
        return Mint(
            mint_authority=mint_authority,
            supply=supply,
            decimals=decimals,
            is_initialized=is_initialized,
            freeze_authority=freeze_authority,
        )


@dataclass(frozen=True, slots=True)
class TokenAccount(_Account):
    mint: Pubkey
    owner: Pubkey
    amount: int
    delegate: Pubkey | None = None
    state: AccountState = AccountState.INITIALIZED
    is_native: int | None = None
    delegated_amount: int = 0
    close_authority: Pubkey | None = None

    def write(self, w: ByteWriter) -> None:
        w.write_pubkey(self.mint).write_pubkey(self.owner).write_u64(self.amount)
        w.write_coption_pubkey(self.delegate)
        w.write_enum(self.state)
        w.write_coption_u64(self.is_native)
        w.write_u64(self.delegated_amount)
        w.write_coption_pubkey(self.close_authority)

    @staticmethod
    def from_bytes(data: bytes) -> TokenAccount:
        r = ByteReader(data[:TOKEN_ACCOUNT_SIZE])
        mint = r.read_pubkey()
        owner = r.read_pubkey()
        amount = r.read_u64()
        delegate = r.read_coption_pubkey()
        state = r.read_enum(AccountState)
        is_native = r.read_coption_u64()
        delegated_amount = r.read_u64()
        close_authority = r.read_coption_pubkey()
        return TokenAccount(
            mint=mint,
            owner=owner,
            amount=amount,
            delegate=delegate,
            state=state,
            is_native=is_native,
            delegated_amount=delegated_amount,
            close_authority=close_authority,
        )


def account_key(data: bytes) -> Key:
    """Read the leading `Key` byte of a Token Metadata account."""
    if not data:
        raise BufferUnderrunError("Empty account data has no Key discriminator")
    return decode_enum(Key, data[0])

