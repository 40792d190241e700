"""
Role and payload-key seed strings.

Each role family maps its enum members onto a fixed snake_case string that is
used verbatim as a PDA seed. Plain strings are passed through unchanged so
callers can hand in pre-resolved seeds.

The metadata delegate roles exist in two generations. The current table has
eight roles and the legacy one has five; both are kept because a role such as
``COLLECTION`` derives different addresses depending on the table in use.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum
from types import MappingProxyType
from typing import Final, TypeVar

from .enums import (
    HolderDelegateRole,
    LegacyMetadataDelegateRole,
    MetadataDelegateRole,
    PayloadKey,
)
from .errors import EncodingFormatError, InvalidRoleArgumentError

E = TypeVar("E", bound=IntEnum)

METADATA_DELEGATE_ROLE_SEEDS: Final[Mapping[MetadataDelegateRole, str]] = (
    MappingProxyType(
        {
            MetadataDelegateRole.AUTHORITY_ITEM: "authority_item_delegate",
            MetadataDelegateRole.COLLECTION: "collection_delegate",
            MetadataDelegateRole.USE: "use_delegate",
            MetadataDelegateRole.DATA: "data_delegate",
            MetadataDelegateRole.PROGRAMMABLE_CONFIG: "programmable_config_delegate",
            MetadataDelegateRole.DATA_ITEM: "data_item_delegate",
            MetadataDelegateRole.COLLECTION_ITEM: "collection_item_delegate",
            MetadataDelegateRole.PROGRAMMABLE_CONFIG_ITEM: "prog_config_item_delegate",
        }
    )
)

LEGACY_METADATA_DELEGATE_ROLE_SEEDS: Final[
    Mapping[LegacyMetadataDelegateRole, str]
] = MappingProxyType(
    {
        LegacyMetadataDelegateRole.AUTHORITY: "authority_delegate",
        LegacyMetadataDelegateRole.COLLECTION: "collection_delegate",
        LegacyMetadataDelegateRole.USE: "use_delegate",
        LegacyMetadataDelegateRole.UPDATE: "update_delegate",
        LegacyMetadataDelegateRole.PROGRAMMABLE_CONFIG: "programmable_config_delegate",
    }
)

HOLDER_DELEGATE_ROLE_SEEDS: Final[Mapping[HolderDelegateRole, str]] = (
    MappingProxyType({HolderDelegateRole.PRINT_DELEGATE: "print_delegate"})
)

PAYLOAD_KEY_NAMES: Final[Mapping[PayloadKey, str]] = MappingProxyType(
    {
        PayloadKey.AMOUNT: "amount",
        PayloadKey.AUTHORITY: "authority",
        PayloadKey.AUTHORITY_SEEDS: "authority_seeds",
        PayloadKey.DELEGATE: "delegate",
        PayloadKey.DELEGATE_SEEDS: "delegate_seeds",
        PayloadKey.DESTINATION: "destination",
        PayloadKey.DESTINATION_SEEDS: "destination_seeds",
        PayloadKey.HOLDER: "holder",
        PayloadKey.SOURCE: "source",
        PayloadKey.SOURCE_SEEDS: "source_seeds",
    }
)


def _resolve(value: object, enum_cls: type[E], table: Mapping[E, str]) -> str:
    if isinstance(value, str):
        return value
    # IntEnum members of other families compare equal to ints, so check the type.
    if type(value) is enum_cls and value in table:
        return table[value]  # type: ignore[index]
    raise InvalidRoleArgumentError(
        f"Invalid {enum_cls.__name__} argument: {value!r}"
    )


def _reverse(seed: str | bytes, enum_cls: type[E], table: Mapping[E, str]) -> E:
    name = decode_seed(seed) if isinstance(seed, bytes) else seed
    for member, value in table.items():
        if value == name:
            return member
    raise InvalidRoleArgumentError(f"Unknown {enum_cls.__name__} seed: {seed!r}")


# ---------------------------------------------------------------------------
# Enum -> seed string
# ---------------------------------------------------------------------------
def metadata_delegate_role_seed(role: str | MetadataDelegateRole) -> str:
    """Return the seed string for a current-generation metadata delegate role."""
    return _resolve(role, MetadataDelegateRole, METADATA_DELEGATE_ROLE_SEEDS)


def legacy_metadata_delegate_role_seed(role: str | LegacyMetadataDelegateRole) -> str:
    """Return the seed string for a first-generation metadata delegate role."""
    return _resolve(
        role, LegacyMetadataDelegateRole, LEGACY_METADATA_DELEGATE_ROLE_SEEDS
    )


def holder_delegate_role_seed(role: str | HolderDelegateRole) -> str:
    return _resolve(role, HolderDelegateRole, HOLDER_DELEGATE_ROLE_SEEDS)


def payload_key_name(key: str | PayloadKey) -> str:
    return _resolve(key, PayloadKey, PAYLOAD_KEY_NAMES)


# ---------------------------------------------------------------------------
# Seed bytes
# ---------------------------------------------------------------------------
def encode_metadata_delegate_role_seed(role: str | MetadataDelegateRole) -> bytes:
    return metadata_delegate_role_seed(role).encode("utf-8")


def encode_legacy_metadata_delegate_role_seed(
    role: str | LegacyMetadataDelegateRole,
) -> bytes:
    return legacy_metadata_delegate_role_seed(role).encode("utf-8")


def encode_holder_delegate_role_seed(role: str | HolderDelegateRole) -> bytes:
    return holder_delegate_role_seed(role).encode("utf-8")


def decode_seed(data: bytes) -> str:
    """Decode a UTF-8 seed back into its string form."""
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise EncodingFormatError(f"Seed is not valid UTF-8: {data!r}") from e


# ---------------------------------------------------------------------------
# Seed string -> enum
# ---------------------------------------------------------------------------
def metadata_delegate_role_from_seed(seed: str | bytes) -> MetadataDelegateRole:
    return _reverse(seed, MetadataDelegateRole, METADATA_DELEGATE_ROLE_SEEDS)


def legacy_metadata_delegate_role_from_seed(
    seed: str | bytes,
) -> LegacyMetadataDelegateRole:
    return _reverse(
        seed, LegacyMetadataDelegateRole, LEGACY_METADATA_DELEGATE_ROLE_SEEDS
    )


def holder_delegate_role_from_seed(seed: str | bytes) -> HolderDelegateRole:
    return _reverse(seed, HolderDelegateRole, HOLDER_DELEGATE_ROLE_SEEDS)


def payload_key_from_name(name: str | bytes) -> PayloadKey:
    return _reverse(name, PayloadKey, PAYLOAD_KEY_NAMES)
