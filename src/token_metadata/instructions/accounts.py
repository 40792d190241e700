"""Account-meta helpers shared by the instruction builders."""

from __future__ import annotations

from solders.instruction import AccountMeta
from solders.pubkey import Pubkey

from ..enums import TokenStandard

NON_FUNGIBLE_STANDARDS = frozenset(
    {
        TokenStandard.NON_FUNGIBLE,
        TokenStandard.NON_FUNGIBLE_EDITION,
        TokenStandard.PROGRAMMABLE_NON_FUNGIBLE,
        TokenStandard.PROGRAMMABLE_NON_FUNGIBLE_EDITION,
    }
)

PROGRAMMABLE_STANDARDS = frozenset(
    {
        TokenStandard.PROGRAMMABLE_NON_FUNGIBLE,
        TokenStandard.PROGRAMMABLE_NON_FUNGIBLE_EDITION,
    }
)


def is_non_fungible_standard(token_standard: TokenStandard | None) -> bool:
    return token_standard in NON_FUNGIBLE_STANDARDS


def is_programmable_standard(token_standard: TokenStandard | None) -> bool:
    return token_standard in PROGRAMMABLE_STANDARDS


def meta(pubkey: Pubkey, *, signer: bool = False, writable: bool = False) -> AccountMeta:
    return AccountMeta(pubkey=pubkey, is_signer=signer, is_writable=writable)


def optional_meta(
    pubkey: Pubkey | None,
    program_id: Pubkey,
    *,
    signer: bool = False,
    writable: bool = False,
) -> AccountMeta:
    """
    Meta for an optional account.

    The program reads its own id in an optional slot as "account not
    provided", so an omitted account is passed as the program id, read-only
    and unsigned.
    """
    if pubkey is None:
        return AccountMeta(pubkey=program_id, is_signer=False, is_writable=False)
    return meta(pubkey, signer=signer, writable=writable)


def or_default(pubkey: Pubkey | None, default: Pubkey) -> Pubkey:
    """`pubkey`, or `default` when it was not provided."""
    return default if pubkey is None else pubkey
