"""Print (edition mint) instructions."""

from __future__ import annotations

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

from ..constants import (
    SPL_ASSOCIATED_TOKEN_PROGRAM_ID,
    SPL_TOKEN_PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
    SYSVAR_INSTRUCTIONS_ID,
    TOKEN_METADATA_PROGRAM_ID,
)
from ..enums import TokenStandard
from ..pda import (
    edition_marker_index,
    find_associated_token_pda,
    find_edition_marker_pda,
    find_edition_marker_v2_pda,
    find_master_edition_pda,
    find_metadata_pda,
    find_token_record_pda,
)
from .accounts import is_programmable_standard, meta, optional_meta, or_default
from .args import PrintArgsKind, print_data


def print_accounts(
    *,
    master_edition_mint: Pubkey,
    edition_mint: Pubkey,
    edition_number: int,
    master_token_account_owner: Pubkey,
    update_authority: Pubkey,
    signer: Pubkey,
    token_standard: TokenStandard = TokenStandard.NON_FUNGIBLE,
    payer: Pubkey | None = None,
    edition_mint_authority: Pubkey | None = None,
    edition_token_account_owner: Pubkey | None = None,
    edition_token_account: Pubkey | None = None,
    edition_token_record: Pubkey | None = None,
    edition_metadata: Pubkey | None = None,
    edition: Pubkey | None = None,
    master_edition: Pubkey | None = None,
    edition_marker: Pubkey | None = None,
    master_token_account: Pubkey | None = None,
    master_metadata: Pubkey | None = None,
    spl_token_program: Pubkey = SPL_TOKEN_PROGRAM_ID,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> list[AccountMeta]:
    """
    Resolve and order the accounts shared by every print instruction.

    `signer` is who authorizes the print: the master token owner, or a print
    delegate. It defaults the payer, the edition mint authority and the
    edition token owner; the master token owner only signs when it is the
    `signer`.
    """
    if edition_metadata is None:
        edition_metadata = find_metadata_pda(edition_mint, program_id=program_id).address
    if edition is None:
        edition = find_master_edition_pda(edition_mint, program_id=program_id).address
    edition_token_account_owner = or_default(edition_token_account_owner, signer)
    if edition_token_account is None:
        edition_token_account = find_associated_token_pda(
            edition_token_account_owner,
            edition_mint,
            token_program_id=spl_token_program,
        ).address
    programmable = is_programmable_standard(token_standard)
    if edition_token_record is None and programmable:
        edition_token_record = find_token_record_pda(
            edition_mint, edition_token_account, program_id=program_id
        ).address
    if master_edition is None:
        master_edition = find_master_edition_pda(
            master_edition_mint, program_id=program_id
        ).address
    if edition_marker is None:
        if programmable:
            edition_marker = find_edition_marker_v2_pda(
                master_edition_mint, program_id=program_id
            ).address
        else:
            # The program checks the decimal string form of the marker index.
            edition_marker = find_edition_marker_pda(
                master_edition_mint,
                str(edition_marker_index(edition_number)),
                program_id=program_id,
            ).address
    if master_token_account is None:
        master_token_account = find_associated_token_pda(
            master_token_account_owner,
            master_edition_mint,
            token_program_id=spl_token_program,
        ).address
    if master_metadata is None:
        master_metadata = find_metadata_pda(
            master_edition_mint, program_id=program_id
        ).address

    return [
        meta(edition_metadata, writable=True),
        meta(edition, writable=True),
        meta(edition_mint, signer=True, writable=True),
        meta(edition_token_account_owner),
        meta(edition_token_account, writable=True),
        meta(or_default(edition_mint_authority, signer), signer=True),
        optional_meta(edition_token_record, program_id, writable=True),
        meta(master_edition, writable=True),
        meta(edition_marker, writable=True),
        meta(or_default(payer, signer), signer=True, writable=True),
        meta(master_token_account_owner, signer=signer == master_token_account_owner),
        meta(master_token_account),
        meta(master_metadata),
        meta(update_authority),
        meta(spl_token_program),
        meta(SPL_ASSOCIATED_TOKEN_PROGRAM_ID),
        meta(SYSVAR_INSTRUCTIONS_ID),
        meta(SYSTEM_PROGRAM_ID),
    ]


def print_v1(
    *,
    master_edition_mint: Pubkey,
    edition_mint: Pubkey,
    edition_number: int,
    master_token_account_owner: Pubkey,
    update_authority: Pubkey,
    token_standard: TokenStandard = TokenStandard.NON_FUNGIBLE,
    payer: Pubkey | None = None,
    edition_mint_authority: Pubkey | None = None,
    edition_token_account_owner: Pubkey | None = None,
    edition_token_account: Pubkey | None = None,
    edition_token_record: Pubkey | None = None,
    edition_metadata: Pubkey | None = None,
    edition: Pubkey | None = None,
    master_edition: Pubkey | None = None,
    edition_marker: Pubkey | None = None,
    master_token_account: Pubkey | None = None,
    master_metadata: Pubkey | None = None,
    spl_token_program: Pubkey = SPL_TOKEN_PROGRAM_ID,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    """
    Print edition `edition_number` of the master edition of
    `master_edition_mint` into the new mint `edition_mint`.

    The holder of the master token (`master_token_account_owner`) signs and,
    unless given otherwise, pays, owns the new token and is its mint
    authority. Editions of programmable NFTs are tracked in the V2 edition
    marker; all others in the marker covering `edition_number`.
    """
    accounts = print_accounts(
        master_edition_mint=master_edition_mint,
        edition_mint=edition_mint,
        edition_number=edition_number,
        master_token_account_owner=master_token_account_owner,
        update_authority=update_authority,
        signer=master_token_account_owner,
        token_standard=token_standard,
        payer=payer,
        edition_mint_authority=edition_mint_authority,
        edition_token_account_owner=edition_token_account_owner,
        edition_token_account=edition_token_account,
        edition_token_record=edition_token_record,
        edition_metadata=edition_metadata,
        edition=edition,
        master_edition=master_edition,
        edition_marker=edition_marker,
        master_token_account=master_token_account,
        master_metadata=master_metadata,
        spl_token_program=spl_token_program,
        program_id=program_id,
    )
    data = print_data(PrintArgsKind.V1, edition_number)
    return Instruction(program_id, data, accounts)


def print_v2(
    *,
    master_edition_mint: Pubkey,
    edition_mint: Pubkey,
    edition_number: int,
    master_token_account_owner: Pubkey,
    update_authority: Pubkey,
    token_standard: TokenStandard = TokenStandard.NON_FUNGIBLE,
    holder_delegate_record: Pubkey | None = None,
    delegate: Pubkey | None = None,
    payer: Pubkey | None = None,
    edition_mint_authority: Pubkey | None = None,
    edition_token_account_owner: Pubkey | None = None,
    edition_token_account: Pubkey | None = None,
    edition_token_record: Pubkey | None = None,
    edition_metadata: Pubkey | None = None,
    edition: Pubkey | None = None,
    master_edition: Pubkey | None = None,
    edition_marker: Pubkey | None = None,
    master_token_account: Pubkey | None = None,
    master_metadata: Pubkey | None = None,
    spl_token_program: Pubkey = SPL_TOKEN_PROGRAM_ID,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    """
    Like `print_v1`, with two trailing optional accounts for printing as a
    print delegate: the holder delegate record and the signing `delegate`.
    The master token owner only signs when no delegate is given.
    """
    accounts = print_accounts(
        master_edition_mint=master_edition_mint,
        edition_mint=edition_mint,
        edition_number=edition_number,
        master_token_account_owner=master_token_account_owner,
        update_authority=update_authority,
        signer=or_default(delegate, master_token_account_owner),
        token_standard=token_standard,
        payer=payer,
        edition_mint_authority=edition_mint_authority,
        edition_token_account_owner=edition_token_account_owner,
        edition_token_account=edition_token_account,
        edition_token_record=edition_token_record,
        edition_metadata=edition_metadata,
        edition=edition,
        master_edition=master_edition,
        edition_marker=edition_marker,
        master_token_account=master_token_account,
        master_metadata=master_metadata,
        spl_token_program=spl_token_program,
        program_id=program_id,
    )
    accounts.append(optional_meta(holder_delegate_record, program_id, writable=True))
    accounts.append(optional_meta(delegate, program_id, signer=True))
    data = print_data(PrintArgsKind.V2, edition_number)
    return Instruction(program_id, data, accounts)
