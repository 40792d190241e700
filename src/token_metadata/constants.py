"""Token Metadata program and Solana runtime constants."""

from typing import Final

from solders.pubkey import Pubkey

# ---------------------------------------------------------------------------
# Program IDs
# ---------------------------------------------------------------------------
TOKEN_METADATA_PROGRAM_ID_STR: Final[str] = (
    "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s"
)
TOKEN_AUTH_RULES_PROGRAM_ID_STR: Final[str] = (
    "auth9SigNpDKz4sJJ1DfCTuZrZNSAgh9sFD3rboVmgg"
)
SPL_TOKEN_PROGRAM_ID_STR: Final[str] = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
SPL_TOKEN_2022_PROGRAM_ID_STR: Final[str] = (
    "TokenzQdBNbLqP5VEhdkAS6EPFLC1PHnBqCXEpPxuEb"
)
SPL_ASSOCIATED_TOKEN_PROGRAM_ID_STR: Final[str] = (
    "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"
)
SYSTEM_PROGRAM_ID_STR: Final[str] = "11111111111111111111111111111111"
SYSVAR_INSTRUCTIONS_ID_STR: Final[str] = "Sysvar1nstructions1111111111111111111111111"

TOKEN_METADATA_PROGRAM_ID: Final[Pubkey] = Pubkey.from_string(
    TOKEN_METADATA_PROGRAM_ID_STR
)
TOKEN_AUTH_RULES_PROGRAM_ID: Final[Pubkey] = Pubkey.from_string(
    TOKEN_AUTH_RULES_PROGRAM_ID_STR
)
SPL_TOKEN_PROGRAM_ID: Final[Pubkey] = Pubkey.from_string(SPL_TOKEN_PROGRAM_ID_STR)
SPL_TOKEN_2022_PROGRAM_ID: Final[Pubkey] = Pubkey.from_string(
    SPL_TOKEN_2022_PROGRAM_ID_STR
)
SPL_ASSOCIATED_TOKEN_PROGRAM_ID: Final[Pubkey] = Pubkey.from_string(
    SPL_ASSOCIATED_TOKEN_PROGRAM_ID_STR
)
SYSTEM_PROGRAM_ID: Final[Pubkey] = Pubkey.from_string(SYSTEM_PROGRAM_ID_STR)
SYSVAR_INSTRUCTIONS_ID: Final[Pubkey] = Pubkey.from_string(
    SYSVAR_INSTRUCTIONS_ID_STR
)


# ---------------------------------------------------------------------------
# Solana runtime constants
# ---------------------------------------------------------------------------
PUBKEY_SIZE: Final[int] = 32
DEFAULT_PUBKEY: Final[Pubkey] = Pubkey.default()
MAX_SEEDS: Final[int] = 16
MAX_SEED_LEN: Final[int] = 32


# ---------------------------------------------------------------------------
# Borsh encoding
# ---------------------------------------------------------------------------
U8_SIZE: Final[int] = 1
U16_SIZE: Final[int] = 2
U32_SIZE: Final[int] = 4
U64_SIZE: Final[int] = 8
U128_SIZE: Final[int] = 16

COPTION_TAG_SIZE: Final[int] = U32_SIZE

BYTE_ORDER: Final = "little"


# ---------------------------------------------------------------------------
# PDA seeds
# ---------------------------------------------------------------------------
# Every Token Metadata PDA starts with PREFIX + program id + mint.
PREFIX: Final[bytes] = b"metadata"
EDITION: Final[bytes] = b"edition"
MARKER: Final[bytes] = b"marker"
TOKEN_RECORD_SEED: Final[bytes] = b"token_record"
COLLECTION_AUTHORITY: Final[bytes] = b"collection_authority"
USER: Final[bytes] = b"user"
ESCROW_POSTFIX: Final[bytes] = b"escrow"
# Borsh tags of EscrowAuthority, placed before ESCROW_POSTFIX.
ESCROW_TOKEN_OWNER_SEED: Final[bytes] = b"\x00"
ESCROW_CREATOR_SEED: Final[bytes] = b"\x01"


# ---------------------------------------------------------------------------
# Editions
# ---------------------------------------------------------------------------
EDITION_MARKER_BIT_SIZE: Final[int] = 248
EDITION_MARKER_LEDGER_SIZE: Final[int] = 31
MAX_MASTER_EDITION_LEN: Final[int] = 1 + 9 + 8 + 264
MAX_EDITION_LEN: Final[int] = 1 + 32 + 8 + 200


# ---------------------------------------------------------------------------
# Metadata account
# ---------------------------------------------------------------------------
MAX_NAME_LENGTH: Final[int] = 32
MAX_SYMBOL_LENGTH: Final[int] = 10
MAX_URI_LENGTH: Final[int] = 200
MAX_CREATOR_LIMIT: Final[int] = 5
MAX_CREATOR_LEN: Final[int] = PUBKEY_SIZE + 1 + 1

MAX_DATA_SIZE: Final[int] = (
    4
    + MAX_NAME_LENGTH
    + 4
    + MAX_SYMBOL_LENGTH
    + 4
    + MAX_URI_LENGTH
    + 2
    + 1
    + 4
    + MAX_CREATOR_LIMIT * MAX_CREATOR_LEN
)

MAX_METADATA_LEN: Final[int] = (
    1  # key
    + PUBKEY_SIZE  # update authority
    + PUBKEY_SIZE  # mint
    + MAX_DATA_SIZE
    + 1  # primary sale
    + 1  # mutable
    + 9  # edition nonce
    + 172  # token standard, collection, uses, details, config and padding
)

MAX_SELLER_FEE_BASIS_POINTS: Final[int] = 10_000
MAX_CREATOR_SHARE: Final[int] = 100


# ---------------------------------------------------------------------------
# Record accounts
# ---------------------------------------------------------------------------
METADATA_DELEGATE_RECORD_SIZE: Final[int] = 98
HOLDER_DELEGATE_RECORD_SIZE: Final[int] = 98
TOKEN_RECORD_SIZE: Final[int] = 80


# ---------------------------------------------------------------------------
# SPL Token accounts
# ---------------------------------------------------------------------------
MINT_SIZE: Final[int] = 82
TOKEN_ACCOUNT_SIZE: Final[int] = 165
