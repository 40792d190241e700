"""Create and update instructions."""

from __future__ import annotations

from solders.instruction import Instruction
from solders.pubkey import Pubkey

from ..constants import (
    SPL_TOKEN_PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
    SYSVAR_INSTRUCTIONS_ID,
    TOKEN_AUTH_RULES_PROGRAM_ID,
    TOKEN_METADATA_PROGRAM_ID,
)
from ..enums import MetadataDelegateRole
from ..pda import (
    find_master_edition_pda,
    find_metadata_delegate_record_pda,
    find_metadata_pda,
)
from .accounts import is_non_fungible_standard, meta, optional_meta, or_default
from .args import CreateV1Args, UpdateArgs, UpdateArgsKind

UPDATE_DELEGATE_ROLES: dict[UpdateArgsKind, MetadataDelegateRole] = {
    UpdateArgsKind.AS_AUTHORITY_ITEM_DELEGATE_V2: MetadataDelegateRole.AUTHORITY_ITEM,
    UpdateArgsKind.AS_COLLECTION_DELEGATE_V2: MetadataDelegateRole.COLLECTION,
    UpdateArgsKind.AS_DATA_DELEGATE_V2: MetadataDelegateRole.DATA,
    UpdateArgsKind.AS_PROGRAMMABLE_CONFIG_DELEGATE_V2: (
        MetadataDelegateRole.PROGRAMMABLE_CONFIG
    ),
    UpdateArgsKind.AS_DATA_ITEM_DELEGATE_V2: MetadataDelegateRole.DATA_ITEM,
    UpdateArgsKind.AS_COLLECTION_ITEM_DELEGATE_V2: MetadataDelegateRole.COLLECTION_ITEM,
    UpdateArgsKind.AS_PROGRAMMABLE_CONFIG_ITEM_DELEGATE_V2: (
        MetadataDelegateRole.PROGRAMMABLE_CONFIG_ITEM
    ),
}


def create_v1(
    args: CreateV1Args,
    *,
    mint: Pubkey,
    authority: Pubkey,
    payer: Pubkey | None = None,
    update_authority: Pubkey | None = None,
    update_authority_as_signer: bool = False,
    mint_is_signer: bool = True,
    metadata: Pubkey | None = None,
    master_edition: Pubkey | None = None,
    spl_token_program: Pubkey = SPL_TOKEN_PROGRAM_ID,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    """
    Create the metadata (and master edition for non-fungibles) of `mint`.

    `mint_is_signer` must be True when the mint account does not exist yet
    and the program creates it. `authority` is the mint authority.
    """
    if metadata is None:
        metadata = find_metadata_pda(mint, program_id=program_id).address
    if master_edition is None and is_non_fungible_standard(args.token_standard):
        master_edition = find_master_edition_pda(mint, program_id=program_id).address

    accounts = [
        meta(metadata, writable=True),
        optional_meta(master_edition, program_id, writable=True),
        meta(mint, signer=mint_is_signer, writable=True),
        meta(authority, signer=True),
        meta(or_default(payer, authority), signer=True, writable=True),
        meta(
            or_default(update_authority, authority),
            signer=update_authority_as_signer,
        ),
        meta(SYSTEM_PROGRAM_ID),
        meta(SYSVAR_INSTRUCTIONS_ID),
        meta(spl_token_program),
    ]
    return Instruction(program_id, args.serialized, accounts)


def update(
    args: UpdateArgs,
    *,
    mint: Pubkey,
    authority: Pubkey,
    payer: Pubkey | None = None,
    metadata: Pubkey | None = None,
    delegate_record: Pubkey | None = None,
    token: Pubkey | None = None,
    edition: Pubkey | None = None,
    authorization_rules: Pubkey | None = None,
    authorization_rules_program: Pubkey | None = None,
    delegate_mint: Pubkey | None = None,
    delegate_update_authority: Pubkey | None = None,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    """
    Build an Update instruction for any `UpdateArgsKind` variant.

    For the ``AS_*_DELEGATE_V2`` variants `authority` is the delegate, and the
    delegate record defaults to the metadata delegate record of
    (`delegate_mint`, role, `delegate_update_authority`, `authority`). Both
    default to `mint` and `authority`.
    """
    role = UPDATE_DELEGATE_ROLES.get(args.kind)
    if delegate_record is None and role is not None:
        delegate_record = find_metadata_delegate_record_pda(
            or_default(delegate_mint, mint),
            role,
            or_default(delegate_update_authority, authority),
            authority,
            program_id=program_id,
        ).address
    if metadata is None:
        metadata = find_metadata_pda(mint, program_id=program_id).address
    if authorization_rules_program is None and authorization_rules is not None:
        authorization_rules_program = TOKEN_AUTH_RULES_PROGRAM_ID

    accounts = [
        meta(authority, signer=True),
        optional_meta(delegate_record, program_id),
        optional_meta(token, program_id),
        meta(mint),
        meta(metadata, writable=True),
        optional_meta(edition, program_id),
        meta(or_default(payer, authority), signer=True, writable=True),
        meta(SYSTEM_PROGRAM_ID),
        meta(SYSVAR_INSTRUCTIONS_ID),
        optional_meta(authorization_rules_program, program_id),
        optional_meta(authorization_rules, program_id),
    ]
    return Instruction(program_id, args.serialized, accounts)


def _with_kind(args: UpdateArgs | None, kind: UpdateArgsKind) -> UpdateArgs:
    if args is None:
        return UpdateArgs(kind=kind)
    if args.kind != kind:
        raise ValueError(
            f"Expected update args of kind {kind.name}, got {args.kind.name}"
        )
    return args


def update_v1(args: UpdateArgs | None = None, **accounts: Pubkey | None) -> Instruction:
    return update(_with_kind(args, UpdateArgsKind.V1), **accounts)


def update_as_update_authority_v2(
    args: UpdateArgs | None = None, **accounts: Pubkey | None
) -> Instruction:
    kind = UpdateArgsKind.AS_UPDATE_AUTHORITY_V2
    return update(_with_kind(args, kind), **accounts)


def update_as_authority_item_delegate_v2(
    args: UpdateArgs | None = None, **accounts: Pubkey | None
) -> Instruction:
    kind = UpdateArgsKind.AS_AUTHORITY_ITEM_DELEGATE_V2
    return update(_with_kind(args, kind), **accounts)


def update_as_collection_delegate_v2(
    args: UpdateArgs | None = None, **accounts: Pubkey | None
) -> Instruction:
    kind = UpdateArgsKind.AS_COLLECTION_DELEGATE_V2
    return update(_with_kind(args, kind), **accounts)


def update_as_data_delegate_v2(
    args: UpdateArgs | None = None, **accounts: Pubkey | None
) -> Instruction:
    kind = UpdateArgsKind.AS_DATA_DELEGATE_V2
    return update(_with_kind(args, kind), **accounts)


def update_as_programmable_config_delegate_v2(
    args: UpdateArgs | None = None, **accounts: Pubkey | None
) -> Instruction:
    kind = UpdateArgsKind.AS_PROGRAMMABLE_CONFIG_DELEGATE_V2
    return update(_with_kind(args, kind), **accounts)


def update_as_data_item_delegate_v2(
    args: UpdateArgs | None = None, **accounts: Pubkey | None
) -> Instruction:
    kind = UpdateArgsKind.AS_DATA_ITEM_DELEGATE_V2
    return update(_with_kind(args, kind), **accounts)


def update_as_collection_item_delegate_v2(
    args: UpdateArgs | None = None, **accounts: Pubkey | None
) -> Instruction:
    kind = UpdateArgsKind.AS_COLLECTION_ITEM_DELEGATE_V2
    return update(_with_kind(args, kind), **accounts)


def update_as_programmable_config_item_delegate_v2(
    args: UpdateArgs | None = None, **accounts: Pubkey | None
) -> Instruction:
    kind = UpdateArgsKind.AS_PROGRAMMABLE_CONFIG_ITEM_DELEGATE_V2
    return update(_with_kind(args, kind), **accounts)
