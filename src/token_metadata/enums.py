"""Token Metadata program enums, valued by their Borsh discriminant."""

from __future__ import annotations

from enum import IntEnum


# ---------------------------------------------------------------------------
# Account discriminators
# ---------------------------------------------------------------------------
class Key(IntEnum):
    UNINITIALIZED = 0
    EDITION_V1 = 1
    MASTER_EDITION_V1 = 2
    RESERVATION_LIST_V1 = 3
    METADATA_V1 = 4
    RESERVATION_LIST_V2 = 5
    MASTER_EDITION_V2 = 6
    EDITION_MARKER = 7
    USE_AUTHORITY_RECORD = 8
    COLLECTION_AUTHORITY_RECORD = 9
    TOKEN_OWNED_ESCROW = 10
    TOKEN_RECORD = 11
    METADATA_DELEGATE = 12
    EDITION_MARKER_V2 = 13
    HOLDER_DELEGATE = 14


# ---------------------------------------------------------------------------
# Asset enums
# ---------------------------------------------------------------------------
class TokenStandard(IntEnum):
    NON_FUNGIBLE = 0
    FUNGIBLE_ASSET = 1
    FUNGIBLE = 2
    NON_FUNGIBLE_EDITION = 3
    PROGRAMMABLE_NON_FUNGIBLE = 4
    PROGRAMMABLE_NON_FUNGIBLE_EDITION = 5


class UseMethod(IntEnum):
    BURN = 0
    MULTIPLE = 1
    SINGLE = 2


class TokenState(IntEnum):
    UNLOCKED = 0
    LOCKED = 1
    LISTED = 2


class AccountState(IntEnum):
    """SPL Token account state."""

    UNINITIALIZED = 0
    INITIALIZED = 1
    FROZEN = 2


# ---------------------------------------------------------------------------
# Delegate roles
# ---------------------------------------------------------------------------
class TokenDelegateRole(IntEnum):
    SALE = 0
    TRANSFER = 1
    UTILITY = 2
    STAKING = 3
    STANDARD = 4
    LOCKED_TRANSFER = 5
    MIGRATION = 6


class MetadataDelegateRole(IntEnum):
    AUTHORITY_ITEM = 0
    COLLECTION = 1
    USE = 2
    DATA = 3
    PROGRAMMABLE_CONFIG = 4
    DATA_ITEM = 5
    COLLECTION_ITEM = 6
    PROGRAMMABLE_CONFIG_ITEM = 7


class LegacyMetadataDelegateRole(IntEnum):
    """Role table used by the first generation of metadata delegates."""

    AUTHORITY = 0
    COLLECTION = 1
    USE = 2
    UPDATE = 3
    PROGRAMMABLE_CONFIG = 4


class HolderDelegateRole(IntEnum):
    PRINT_DELEGATE = 0


# ---------------------------------------------------------------------------
# Authorization payloads
# ---------------------------------------------------------------------------
class PayloadKey(IntEnum):
    AMOUNT = 0
    AUTHORITY = 1
    AUTHORITY_SEEDS = 2
    DELEGATE = 3
    DELEGATE_SEEDS = 4
    DESTINATION = 5
    DESTINATION_SEEDS = 6
    HOLDER = 7
    SOURCE = 8
    SOURCE_SEEDS = 9
