"""
Program-derived address (PDA) derivation for Token Metadata accounts.

Every function returns a `Pda` ``(address, bump)``. Seed order is part of the
on-chain contract: a reordered list silently yields a different address.

All functions accept a keyword-only `derive` argument with the signature of
`solders.pubkey.Pubkey.find_program_address`, so callers can substitute the
derivation primitive (tests use it to capture the seed list).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import NamedTuple

from solders.pubkey import Pubkey

from .codec import encode_u64_le
from .constants import (
    COLLECTION_AUTHORITY,
    EDITION,
    EDITION_MARKER_BIT_SIZE,
    ESCROW_CREATOR_SEED,
    ESCROW_POSTFIX,
    ESCROW_TOKEN_OWNER_SEED,
    MARKER,
    MAX_SEED_LEN,
    MAX_SEEDS,
    PREFIX,
    SPL_ASSOCIATED_TOKEN_PROGRAM_ID,
    SPL_TOKEN_PROGRAM_ID,
    TOKEN_METADATA_PROGRAM_ID,
    TOKEN_RECORD_SEED,
    USER,
)
from .enums import HolderDelegateRole, MetadataDelegateRole
from .errors import AddressDerivationError, EncodingRangeError
from .seeds import encode_holder_delegate_role_seed, encode_metadata_delegate_role_seed

DeriveFn = Callable[[Sequence[bytes], Pubkey], tuple[Pubkey, int]]


class Pda(NamedTuple):
    address: Pubkey
    bump: int


def _default_derive(seeds: Sequence[bytes], program_id: Pubkey) -> tuple[Pubkey, int]:
    return Pubkey.find_program_address(list(seeds), program_id)


def find_program_address(
    seeds: Sequence[bytes],
    program_id: Pubkey,
    *,
    derive: DeriveFn | None = None,
) -> Pda:
    """
    Derive a program address from an ordered seed list.

    Raises:
        AddressDerivationError: If the seeds exceed the runtime limits or the
            derivation primitive fails.
    """
    seeds = [bytes(s) for s in seeds]
    if len(seeds) > MAX_SEEDS:
        raise AddressDerivationError(
            f"At most {MAX_SEEDS} seeds are allowed, got {len(seeds)}"
        )
    for seed in seeds:
        if len(seed) > MAX_SEED_LEN:
            raise AddressDerivationError(
                f"Seed exceeds {MAX_SEED_LEN} bytes: {seed!r}"
            )

    fn = derive if derive is not None else _default_derive
    try:
        address, bump = fn(seeds, program_id)
    except AddressDerivationError:
        raise
    except Exception as e:
        raise AddressDerivationError(
            f"Failed to derive address for program {program_id}: {e}"
        ) from e
    return Pda(address, bump)


def _metadata_seeds(mint: Pubkey, program_id: Pubkey) -> list[bytes]:
    return [PREFIX, bytes(program_id), bytes(mint)]


# ---------------------------------------------------------------------------
# Edition markers
# ---------------------------------------------------------------------------
def edition_marker_index(edition_number: int) -> int:
    """Return the marker bucket holding `edition_number` (248 editions per marker)."""
    if isinstance(edition_number, bool) or not isinstance(edition_number, int):
        raise EncodingRangeError(f"Edition number must be an int, got {edition_number!r}")
    if edition_number < 0 or edition_number >= 1 << 64:
        raise EncodingRangeError(f"Edition number {edition_number} does not fit in u64")
    return edition_number // EDITION_MARKER_BIT_SIZE


def edition_marker_bit(edition_number: int) -> tuple[int, int]:
    """
    Return ``(ledger_index, mask)`` locating an edition inside its marker ledger.

    Bits are stored most-significant first: offset 0 is bit 7 of ledger byte 0.
    """
    edition_marker_index(edition_number)
    offset = edition_number % EDITION_MARKER_BIT_SIZE
    return offset // 8, 1 << (7 - offset % 8)


# ---------------------------------------------------------------------------
# Token Metadata PDAs
# ---------------------------------------------------------------------------
def find_metadata_pda(
    mint: Pubkey,
    *,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
    derive: DeriveFn | None = None,
) -> Pda:
    return find_program_address(
        _metadata_seeds(mint, program_id), program_id, derive=derive
    )


def find_master_edition_pda(
    mint: Pubkey,
    *,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
    derive: DeriveFn | None = None,
) -> Pda:
    """Derive the master edition (or print edition) account of `mint`."""
    return find_program_address(
        [*_metadata_seeds(mint, program_id), EDITION], program_id, derive=derive
    )


def find_edition_marker_pda(
    mint: Pubkey,
    edition_marker: str,
    *,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
    derive: DeriveFn | None = None,
) -> Pda:
    """Derive an edition marker from its decimal string seed."""
    return find_program_address(
        [*_metadata_seeds(mint, program_id), EDITION, edition_marker.encode("utf-8")],
        program_id,
        derive=derive,
    )


def find_edition_marker_from_edition_number_pda(
    mint: Pubkey,
    edition_number: int,
    *,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
    derive: DeriveFn | None = None,
) -> Pda:
    """Derive the edition marker covering `edition_number`, seeded by its u64 index."""
    index = edition_marker_index(edition_number)
    return find_program_address(
        [*_metadata_seeds(mint, program_id), EDITION, encode_u64_le(index)],
        program_id,
        derive=derive,
    )


def find_edition_marker_v2_pda(
    mint: Pubkey,
    *,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
    derive: DeriveFn | None = None,
) -> Pda:
    return find_program_address(
        [*_metadata_seeds(mint, program_id), EDITION, MARKER],
        program_id,
        derive=derive,
    )


def find_token_record_pda(
    mint: Pubkey,
    token: Pubkey,
    *,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
    derive: DeriveFn | None = None,
) -> Pda:
    return find_program_address(
        [*_metadata_seeds(mint, program_id), TOKEN_RECORD_SEED, bytes(token)],
        program_id,
        derive=derive,
    )


def find_metadata_delegate_record_pda(
    mint: Pubkey,
    delegate_role: str | MetadataDelegateRole,
    update_authority: Pubkey,
    delegate: Pubkey,
    *,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
    derive: DeriveFn | None = None,
) -> Pda:
    """
    Derive a metadata delegate record.

    `delegate_role` is a `MetadataDelegateRole` or an already resolved seed
    string (pass a legacy seed string to address first-generation records).
    """
    return find_program_address(
        [
            *_metadata_seeds(mint, program_id),
            encode_metadata_delegate_role_seed(delegate_role),
            bytes(update_authority),
            bytes(delegate),
        ],
        program_id,
        derive=derive,
    )


def find_holder_delegate_record_pda(
    mint: Pubkey,
    delegate_role: str | HolderDelegateRole,
    owner: Pubkey,
    delegate: Pubkey,
    *,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
    derive: DeriveFn | None = None,
) -> Pda:
    return find_program_address(
        [
            *_metadata_seeds(mint, program_id),
            encode_holder_delegate_role_seed(delegate_role),
            bytes(owner),
            bytes(delegate),
        ],
        program_id,
        derive=derive,
    )


def find_collection_authority_record_pda(
    mint: Pubkey,
    collection_authority: Pubkey,
    *,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
    derive: DeriveFn | None = None,
) -> Pda:
    return find_program_address(
        [
            *_metadata_seeds(mint, program_id),
            COLLECTION_AUTHORITY,
            bytes(collection_authority),
        ],
        program_id,
        derive=derive,
    )


def find_use_authority_record_pda(
    mint: Pubkey,
    use_authority: Pubkey,
    *,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
    derive: DeriveFn | None = None,
) -> Pda:
    return find_program_address(
        [*_metadata_seeds(mint, program_id), USER, bytes(use_authority)],
        program_id,
        derive=derive,
    )


def find_escrow_pda(
    mint: Pubkey,
    authority: Pubkey | None = None,
    *,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
    derive: DeriveFn | None = None,
) -> Pda:
    """
    Derive a token-owned escrow account.

    `authority` is the creator pubkey for creator-owned escrows and None when the
    escrow belongs to the token owner. The serialized escrow authority sits
    between the mint and the postfix:
    ``[..., mint, 0, "escrow"]`` or ``[..., mint, 1, creator, "escrow"]``.
    """
    seeds = _metadata_seeds(mint, program_id)
    if authority is None:
        seeds.append(ESCROW_TOKEN_OWNER_SEED)
    else:
        seeds.extend([ESCROW_CREATOR_SEED, bytes(authority)])
    seeds.append(ESCROW_POSTFIX)
    return find_program_address(seeds, program_id, derive=derive)


# ---------------------------------------------------------------------------
# SPL PDAs
# ---------------------------------------------------------------------------
def find_associated_token_pda(
    owner: Pubkey,
    mint: Pubkey,
    *,
    token_program_id: Pubkey = SPL_TOKEN_PROGRAM_ID,
    program_id: Pubkey = SPL_ASSOCIATED_TOKEN_PROGRAM_ID,
    derive: DeriveFn | None = None,
) -> Pda:
    """Derive the associated token account: seeds ``[owner, token_program, mint]``."""
    return find_program_address(
        [bytes(owner), bytes(token_program_id), bytes(mint)],
        program_id,
        derive=derive,
    )
