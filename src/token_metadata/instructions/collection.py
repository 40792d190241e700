"""
Legacy collection authority instructions.

A collection authority record lets another key verify items into a collection
on behalf of its update authority. These single-byte instructions predate the
collection delegate of `delegate_collection_v1`.
"""

from __future__ import annotations

from solders.instruction import Instruction
from solders.pubkey import Pubkey

from ..constants import SYSTEM_PROGRAM_ID, TOKEN_METADATA_PROGRAM_ID
from ..pda import (
    find_collection_authority_record_pda,
    find_master_edition_pda,
    find_metadata_pda,
)
from .accounts import meta, optional_meta, or_default
from .args import InstructionDiscriminator, instruction_data


def approve_collection_authority(
    *,
    mint: Pubkey,
    new_collection_authority: Pubkey,
    update_authority: Pubkey,
    payer: Pubkey | None = None,
    collection_authority_record: Pubkey | None = None,
    metadata: Pubkey | None = None,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    """Create the collection authority record of `new_collection_authority`."""
    if collection_authority_record is None:
        collection_authority_record = find_collection_authority_record_pda(
            mint, new_collection_authority, program_id=program_id
        ).address
    if metadata is None:
        metadata = find_metadata_pda(mint, program_id=program_id).address

    accounts = [
        meta(collection_authority_record, writable=True),
        meta(new_collection_authority),
        meta(update_authority, signer=True, writable=True),
        meta(or_default(payer, update_authority), signer=True, writable=True),
        meta(metadata),
        meta(mint),
        meta(SYSTEM_PROGRAM_ID),
        # Rent sysvar, no longer read by the program.
        optional_meta(None, program_id),
    ]
    data = instruction_data(InstructionDiscriminator.APPROVE_COLLECTION_AUTHORITY)
    return Instruction(program_id, data.to_bytes(), accounts)


def revoke_collection_authority(
    *,
    mint: Pubkey,
    delegate_authority: Pubkey,
    revoke_authority: Pubkey,
    collection_authority_record: Pubkey | None = None,
    metadata: Pubkey | None = None,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    """
    Close the collection authority record of `delegate_authority`.

    `revoke_authority` is either the update authority or the delegate itself.
    """
    if collection_authority_record is None:
        collection_authority_record = find_collection_authority_record_pda(
            mint, delegate_authority, program_id=program_id
        ).address
    if metadata is None:
        metadata = find_metadata_pda(mint, program_id=program_id).address

    accounts = [
        meta(collection_authority_record, writable=True),
        meta(delegate_authority, writable=True),
        meta(revoke_authority, signer=True, writable=True),
        meta(metadata),
        meta(mint),
    ]
    data = instruction_data(InstructionDiscriminator.REVOKE_COLLECTION_AUTHORITY)
    return Instruction(program_id, data.to_bytes(), accounts)


def verify_collection(
    *,
    metadata: Pubkey,
    collection_mint: Pubkey,
    collection_authority: Pubkey,
    payer: Pubkey | None = None,
    collection_metadata: Pubkey | None = None,
    collection_master_edition: Pubkey | None = None,
    collection_authority_record: Pubkey | None = None,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    """
    Verify the collection of an unsized collection item.

    Pass `collection_authority_record` when `collection_authority` is an
    approved collection authority rather than the update authority.
    """
    if collection_metadata is None:
        collection_metadata = find_metadata_pda(
            collection_mint, program_id=program_id
        ).address
    if collection_master_edition is None:
        collection_master_edition = find_master_edition_pda(
            collection_mint, program_id=program_id
        ).address

    accounts = [
        meta(metadata, writable=True),
        meta(collection_authority, signer=True, writable=True),
        meta(or_default(payer, collection_authority), signer=True, writable=True),
        meta(collection_mint),
        meta(collection_metadata),
        meta(collection_master_edition),
        optional_meta(collection_authority_record, program_id),
    ]
    data = instruction_data(InstructionDiscriminator.VERIFY_COLLECTION)
    return Instruction(program_id, data.to_bytes(), accounts)
