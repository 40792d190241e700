"""
Token-owned escrow instructions.

An escrow is owned either by the holder of the NFT (no `authority`) or by a
creator, in which case the creator signs and the escrow address includes
the creator pubkey.
"""

from __future__ import annotations

from solders.instruction import Instruction
from solders.pubkey import Pubkey

from ..constants import (
    SPL_ASSOCIATED_TOKEN_PROGRAM_ID,
    SPL_TOKEN_PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
    SYSVAR_INSTRUCTIONS_ID,
    TOKEN_METADATA_PROGRAM_ID,
)
from ..pda import find_escrow_pda, find_master_edition_pda, find_metadata_pda
from .accounts import meta, optional_meta
from .args import InstructionDiscriminator, instruction_data


def _escrow_defaults(
    mint: Pubkey,
    authority: Pubkey | None,
    escrow: Pubkey | None,
    metadata: Pubkey | None,
    edition: Pubkey | None,
    program_id: Pubkey,
) -> tuple[Pubkey, Pubkey, Pubkey]:
    if escrow is None:
        escrow = find_escrow_pda(mint, authority, program_id=program_id).address
    if metadata is None:
        metadata = find_metadata_pda(mint, program_id=program_id).address
    if edition is None:
        edition = find_master_edition_pda(mint, program_id=program_id).address
    return escrow, metadata, edition


def create_escrow_account(
    *,
    mint: Pubkey,
    token_account: Pubkey,
    payer: Pubkey,
    authority: Pubkey | None = None,
    escrow: Pubkey | None = None,
    metadata: Pubkey | None = None,
    edition: Pubkey | None = None,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    """Create the escrow of `mint`; `authority` is the owning creator, if any."""
    escrow, metadata, edition = _escrow_defaults(
        mint, authority, escrow, metadata, edition, program_id
    )
    accounts = [
        meta(escrow, writable=True),
        meta(metadata, writable=True),
        meta(mint),
        meta(token_account),
        meta(edition),
        meta(payer, signer=True, writable=True),
        meta(SYSTEM_PROGRAM_ID),
        meta(SYSVAR_INSTRUCTIONS_ID),
        optional_meta(authority, program_id, signer=True),
    ]
    data = instruction_data(InstructionDiscriminator.CREATE_ESCROW_ACCOUNT)
    return Instruction(program_id, data.to_bytes(), accounts)


def close_escrow_account(
    *,
    mint: Pubkey,
    token_account: Pubkey,
    payer: Pubkey,
    authority: Pubkey | None = None,
    escrow: Pubkey | None = None,
    metadata: Pubkey | None = None,
    edition: Pubkey | None = None,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    escrow, metadata, edition = _escrow_defaults(
        mint, authority, escrow, metadata, edition, program_id
    )
    accounts = [
        meta(escrow, writable=True),
        meta(metadata, writable=True),
        meta(mint),
        meta(token_account),
        meta(edition),
        meta(payer, signer=True, writable=True),
        meta(SYSTEM_PROGRAM_ID),
        meta(SYSVAR_INSTRUCTIONS_ID),
    ]
    data = instruction_data(InstructionDiscriminator.CLOSE_ESCROW_ACCOUNT)
    return Instruction(program_id, data.to_bytes(), accounts)


def transfer_out_of_escrow(
    *,
    escrow_mint: Pubkey,
    escrow_account: Pubkey,
    attribute_mint: Pubkey,
    attribute_src: Pubkey,
    attribute_dst: Pubkey,
    payer: Pubkey,
    amount: int = 1,
    authority: Pubkey | None = None,
    escrow: Pubkey | None = None,
    metadata: Pubkey | None = None,
    spl_token_program: Pubkey = SPL_TOKEN_PROGRAM_ID,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    """
    Move `amount` of `attribute_mint` held by the escrow of `escrow_mint`
    from `attribute_src` to `attribute_dst`.

    `escrow_account` is the token account holding the escrow NFT.
    """
    if escrow is None:
        escrow = find_escrow_pda(escrow_mint, authority, program_id=program_id).address
    if metadata is None:
        metadata = find_metadata_pda(escrow_mint, program_id=program_id).address

    accounts = [
        meta(escrow),
        meta(metadata, writable=True),
        meta(payer, signer=True, writable=True),
        meta(attribute_mint),
        meta(attribute_src, writable=True),
        meta(attribute_dst, writable=True),
        meta(escrow_mint),
        meta(escrow_account),
        meta(SYSTEM_PROGRAM_ID),
        meta(SPL_ASSOCIATED_TOKEN_PROGRAM_ID),
        meta(spl_token_program),
        meta(SYSVAR_INSTRUCTIONS_ID),
        optional_meta(authority, program_id, signer=True),
    ]
    data = instruction_data(InstructionDiscriminator.TRANSFER_OUT_OF_ESCROW)
    return Instruction(program_id, data.write_u64(amount).to_bytes(), accounts)
