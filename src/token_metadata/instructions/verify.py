"""Creator and collection verification."""

from __future__ import annotations

from solders.instruction import Instruction
from solders.pubkey import Pubkey

from ..constants import (
    SYSTEM_PROGRAM_ID,
    SYSVAR_INSTRUCTIONS_ID,
    TOKEN_METADATA_PROGRAM_ID,
)
from ..pda import find_master_edition_pda, find_metadata_pda
from .accounts import meta, optional_meta
from .args import InstructionDiscriminator, VerificationArgsKind, verification_data


def verify_creator_v1(
    *,
    metadata: Pubkey,
    authority: Pubkey,
    delegate_record: Pubkey | None = None,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    """Mark `authority` as a verified creator of `metadata`; the creator signs."""
    accounts = [
        meta(authority, signer=True),
        optional_meta(delegate_record, program_id),
        meta(metadata, writable=True),
        optional_meta(None, program_id),
        optional_meta(None, program_id),
        optional_meta(None, program_id),
        meta(SYSTEM_PROGRAM_ID),
        meta(SYSVAR_INSTRUCTIONS_ID),
    ]
    data = verification_data(
        InstructionDiscriminator.VERIFY, VerificationArgsKind.CREATOR_V1
    )
    return Instruction(program_id, data, accounts)


def verify_collection_v1(
    *,
    metadata: Pubkey,
    collection_mint: Pubkey,
    authority: Pubkey,
    delegate_record: Pubkey | None = None,
    collection_metadata: Pubkey | None = None,
    collection_master_edition: Pubkey | None = None,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    """
    Verify the collection of `metadata` against `collection_mint`.

    `authority` is the collection update authority or a collection delegate,
    in which case `delegate_record` must be given.
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
        meta(authority, signer=True),
        optional_meta(delegate_record, program_id),
        meta(metadata, writable=True),
        meta(collection_mint),
        meta(collection_metadata, writable=True),
        meta(collection_master_edition),
        meta(SYSTEM_PROGRAM_ID),
        meta(SYSVAR_INSTRUCTIONS_ID),
    ]
    data = verification_data(
        InstructionDiscriminator.VERIFY, VerificationArgsKind.COLLECTION_V1
    )
    return Instruction(program_id, data, accounts)


def unverify_creator_v1(
    *,
    metadata: Pubkey,
    authority: Pubkey,
    delegate_record: Pubkey | None = None,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    accounts = [
        meta(authority, signer=True),
        optional_meta(delegate_record, program_id),
        meta(metadata, writable=True),
        optional_meta(None, program_id),
        optional_meta(None, program_id),
        meta(SYSTEM_PROGRAM_ID),
        meta(SYSVAR_INSTRUCTIONS_ID),
    ]
    data = verification_data(
        InstructionDiscriminator.UNVERIFY, VerificationArgsKind.CREATOR_V1
    )
    return Instruction(program_id, data, accounts)


def unverify_collection_v1(
    *,
    metadata: Pubkey,
    collection_mint: Pubkey,
    authority: Pubkey,
    delegate_record: Pubkey | None = None,
    collection_metadata: Pubkey | None = None,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    if collection_metadata is None:
        collection_metadata = find_metadata_pda(
            collection_mint, program_id=program_id
        ).address

    accounts = [
        meta(authority, signer=True),
        optional_meta(delegate_record, program_id),
        meta(metadata, writable=True),
        meta(collection_mint),
        meta(collection_metadata, writable=True),
        meta(SYSTEM_PROGRAM_ID),
        meta(SYSVAR_INSTRUCTIONS_ID),
    ]
    data = verification_data(
        InstructionDiscriminator.UNVERIFY, VerificationArgsKind.COLLECTION_V1
    )
    return Instruction(program_id, data, accounts)
