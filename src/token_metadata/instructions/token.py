"""Token-level instructions: mint, burn, transfer, lock, unlock, freeze, thaw."""

from __future__ import annotations

from solders.instruction import Instruction
from solders.pubkey import Pubkey

from ..constants import (
    SPL_ASSOCIATED_TOKEN_PROGRAM_ID,
    SPL_TOKEN_PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
    SYSVAR_INSTRUCTIONS_ID,
    TOKEN_AUTH_RULES_PROGRAM_ID,
    TOKEN_METADATA_PROGRAM_ID,
)
from ..enums import TokenStandard
from ..models import AuthorizationData
from ..pda import (
    find_associated_token_pda,
    find_master_edition_pda,
    find_metadata_pda,
    find_token_record_pda,
)
from .accounts import (
    is_non_fungible_standard,
    is_programmable_standard,
    meta,
    optional_meta,
    or_default,
)
from .args import (
    InstructionDiscriminator,
    amount_data,
    authorization_only_data,
    instruction_data,
)


def _auth_rules_program(
    authorization_rules: Pubkey | None, authorization_rules_program: Pubkey | None
) -> Pubkey | None:
    if authorization_rules_program is None and authorization_rules is not None:
        return TOKEN_AUTH_RULES_PROGRAM_ID
    return authorization_rules_program


def _edition(
    edition: Pubkey | None,
    mint: Pubkey,
    token_standard: TokenStandard,
    program_id: Pubkey,
) -> Pubkey | None:
    if edition is None and is_non_fungible_standard(token_standard):
        return find_master_edition_pda(mint, program_id=program_id).address
    return edition


def _token_record(
    token_record: Pubkey | None,
    mint: Pubkey,
    token: Pubkey,
    token_standard: TokenStandard,
    program_id: Pubkey,
) -> Pubkey | None:
    if token_record is None and is_programmable_standard(token_standard):
        return find_token_record_pda(mint, token, program_id=program_id).address
    return token_record


def mint_v1(
    *,
    mint: Pubkey,
    authority: Pubkey,
    amount: int = 1,
    token_standard: TokenStandard = TokenStandard.NON_FUNGIBLE,
    token_owner: Pubkey | None = None,
    token: Pubkey | None = None,
    metadata: Pubkey | None = None,
    master_edition: Pubkey | None = None,
    token_record: Pubkey | None = None,
    delegate_record: Pubkey | None = None,
    payer: Pubkey | None = None,
    authorization_rules: Pubkey | None = None,
    authorization_rules_program: Pubkey | None = None,
    authorization_data: AuthorizationData | None = None,
    spl_token_program: Pubkey = SPL_TOKEN_PROGRAM_ID,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    """
    Mint `amount` tokens to `token_owner` (default `authority`).

    The token account defaults to the owner's associated token account and is
    created by the program when missing.
    """
    token_owner = or_default(token_owner, authority)
    if token is None:
        token = find_associated_token_pda(
            token_owner, mint, token_program_id=spl_token_program
        ).address
    if metadata is None:
        metadata = find_metadata_pda(mint, program_id=program_id).address
    master_edition = _edition(master_edition, mint, token_standard, program_id)
    token_record = _token_record(token_record, mint, token, token_standard, program_id)
    authorization_rules_program = _auth_rules_program(
        authorization_rules, authorization_rules_program
    )

    accounts = [
        meta(token, writable=True),
        meta(token_owner),
        meta(metadata),
        optional_meta(master_edition, program_id, writable=True),
        optional_meta(token_record, program_id, writable=True),
        meta(mint, writable=True),
        meta(authority, signer=True),
        optional_meta(delegate_record, program_id),
        meta(or_default(payer, authority), signer=True, writable=True),
        meta(SYSTEM_PROGRAM_ID),
        meta(SYSVAR_INSTRUCTIONS_ID),
        meta(spl_token_program),
        meta(SPL_ASSOCIATED_TOKEN_PROGRAM_ID),
        optional_meta(authorization_rules_program, program_id),
        optional_meta(authorization_rules, program_id),
    ]
    data = amount_data(InstructionDiscriminator.MINT, amount, authorization_data)
    return Instruction(program_id, data, accounts)


def burn_v1(
    *,
    mint: Pubkey,
    authority: Pubkey,
    amount: int = 1,
    token_standard: TokenStandard = TokenStandard.NON_FUNGIBLE,
    token_owner: Pubkey | None = None,
    token: Pubkey | None = None,
    metadata: Pubkey | None = None,
    edition: Pubkey | None = None,
    collection_metadata: Pubkey | None = None,
    master_edition: Pubkey | None = None,
    master_edition_mint: Pubkey | None = None,
    master_edition_token: Pubkey | None = None,
    edition_marker: Pubkey | None = None,
    token_record: Pubkey | None = None,
    spl_token_program: Pubkey = SPL_TOKEN_PROGRAM_ID,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    """
    Burn `amount` tokens held by `token_owner` (default `authority`).

    Burning a print edition also needs the master edition accounts and the
    edition marker of the print.
    """
    token_owner = or_default(token_owner, authority)
    if token is None:
        token = find_associated_token_pda(
            token_owner, mint, token_program_id=spl_token_program
        ).address
    if metadata is None:
        metadata = find_metadata_pda(mint, program_id=program_id).address
    edition = _edition(edition, mint, token_standard, program_id)
    token_record = _token_record(token_record, mint, token, token_standard, program_id)

    accounts = [
        meta(authority, signer=True, writable=True),
        optional_meta(collection_metadata, program_id, writable=True),
        meta(metadata, writable=True),
        optional_meta(edition, program_id, writable=True),
        meta(mint, writable=True),
        meta(token, writable=True),
        optional_meta(master_edition, program_id),
        optional_meta(master_edition_mint, program_id),
        optional_meta(master_edition_token, program_id),
        optional_meta(edition_marker, program_id, writable=True),
        optional_meta(token_record, program_id, writable=True),
        meta(SYSTEM_PROGRAM_ID),
        meta(SYSVAR_INSTRUCTIONS_ID),
        meta(spl_token_program),
    ]
    data = amount_data(
        InstructionDiscriminator.BURN, amount, with_authorization_data=False
    )
    return Instruction(program_id, data, accounts)


def transfer_v1(
    *,
    mint: Pubkey,
    authority: Pubkey,
    destination_owner: Pubkey,
    amount: int = 1,
    token_standard: TokenStandard = TokenStandard.NON_FUNGIBLE,
    token_owner: Pubkey | None = None,
    token: Pubkey | None = None,
    destination_token: Pubkey | None = None,
    metadata: Pubkey | None = None,
    edition: Pubkey | None = None,
    token_record: Pubkey | None = None,
    destination_token_record: Pubkey | None = None,
    payer: Pubkey | None = None,
    authorization_rules: Pubkey | None = None,
    authorization_rules_program: Pubkey | None = None,
    authorization_data: AuthorizationData | None = None,
    spl_token_program: Pubkey = SPL_TOKEN_PROGRAM_ID,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    token_owner = or_default(token_owner, authority)
    if token is None:
        token = find_associated_token_pda(
            token_owner, mint, token_program_id=spl_token_program
        ).address
    if destination_token is None:
        destination_token = find_associated_token_pda(
            destination_owner, mint, token_program_id=spl_token_program
        ).address
    if metadata is None:
        metadata = find_metadata_pda(mint, program_id=program_id).address
    edition = _edition(edition, mint, token_standard, program_id)
    token_record = _token_record(token_record, mint, token, token_standard, program_id)
    destination_token_record = _token_record(
        destination_token_record, mint, destination_token, token_standard, program_id
    )
    authorization_rules_program = _auth_rules_program(
        authorization_rules, authorization_rules_program
    )

    accounts = [
        meta(token, writable=True),
        meta(token_owner),
        meta(destination_token, writable=True),
        meta(destination_owner),
        meta(mint),
        meta(metadata, writable=True),
        optional_meta(edition, program_id),
        optional_meta(token_record, program_id, writable=True),
        optional_meta(destination_token_record, program_id, writable=True),
        meta(authority, signer=True),
        meta(or_default(payer, authority), signer=True, writable=True),
        meta(SYSTEM_PROGRAM_ID),
        meta(SYSVAR_INSTRUCTIONS_ID),
        meta(spl_token_program),
        meta(SPL_ASSOCIATED_TOKEN_PROGRAM_ID),
        optional_meta(authorization_rules_program, program_id),
        optional_meta(authorization_rules, program_id),
    ]
    data = amount_data(InstructionDiscriminator.TRANSFER, amount, authorization_data)
    return Instruction(program_id, data, accounts)


def _lock_or_unlock(
    discriminator: InstructionDiscriminator,
    *,
    mint: Pubkey,
    authority: Pubkey,
    token_standard: TokenStandard,
    token_owner: Pubkey | None,
    token: Pubkey | None,
    metadata: Pubkey | None,
    edition: Pubkey | None,
    token_record: Pubkey | None,
    payer: Pubkey | None,
    authorization_rules: Pubkey | None,
    authorization_rules_program: Pubkey | None,
    authorization_data: AuthorizationData | None,
    spl_token_program: Pubkey | None,
    program_id: Pubkey,
) -> Instruction:
    if token is None:
        token = find_associated_token_pda(
            or_default(token_owner, authority),
            mint,
            token_program_id=or_default(spl_token_program, SPL_TOKEN_PROGRAM_ID),
        ).address
    if metadata is None:
        metadata = find_metadata_pda(mint, program_id=program_id).address
    edition = _edition(edition, mint, token_standard, program_id)
    token_record = _token_record(token_record, mint, token, token_standard, program_id)
    authorization_rules_program = _auth_rules_program(
        authorization_rules, authorization_rules_program
    )

    accounts = [
        meta(authority, signer=True),
        optional_meta(token_owner, program_id),
        meta(token, writable=True),
        meta(mint),
        meta(metadata, writable=True),
        optional_meta(edition, program_id),
        optional_meta(token_record, program_id, writable=True),
        meta(or_default(payer, authority), signer=True, writable=True),
        meta(SYSTEM_PROGRAM_ID),
        meta(SYSVAR_INSTRUCTIONS_ID),
        optional_meta(spl_token_program, program_id),
        optional_meta(authorization_rules_program, program_id),
        optional_meta(authorization_rules, program_id),
    ]
    data = authorization_only_data(discriminator, authorization_data)
    return Instruction(program_id, data, accounts)


def lock_v1(
    *,
    mint: Pubkey,
    authority: Pubkey,
    token_standard: TokenStandard = TokenStandard.NON_FUNGIBLE,
    token_owner: Pubkey | None = None,
    token: Pubkey | None = None,
    metadata: Pubkey | None = None,
    edition: Pubkey | None = None,
    token_record: Pubkey | None = None,
    payer: Pubkey | None = None,
    authorization_rules: Pubkey | None = None,
    authorization_rules_program: Pubkey | None = None,
    authorization_data: AuthorizationData | None = None,
    spl_token_program: Pubkey | None = SPL_TOKEN_PROGRAM_ID,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    """Lock a token; `authority` is a utility/staking delegate or the freeze authority."""
    return _lock_or_unlock(
        InstructionDiscriminator.LOCK,
        mint=mint,
        authority=authority,
        token_standard=token_standard,
        token_owner=token_owner,
        token=token,
        metadata=metadata,
        edition=edition,
        token_record=token_record,
        payer=payer,
        authorization_rules=authorization_rules,
        authorization_rules_program=authorization_rules_program,
        authorization_data=authorization_data,
        spl_token_program=spl_token_program,
        program_id=program_id,
    )


def unlock_v1(
    *,
    mint: Pubkey,
    authority: Pubkey,
    token_standard: TokenStandard = TokenStandard.NON_FUNGIBLE,
    token_owner: Pubkey | None = None,
    token: Pubkey | None = None,
    metadata: Pubkey | None = None,
    edition: Pubkey | None = None,
    token_record: Pubkey | None = None,
    payer: Pubkey | None = None,
    authorization_rules: Pubkey | None = None,
    authorization_rules_program: Pubkey | None = None,
    authorization_data: AuthorizationData | None = None,
    spl_token_program: Pubkey | None = SPL_TOKEN_PROGRAM_ID,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    return _lock_or_unlock(
        InstructionDiscriminator.UNLOCK,
        mint=mint,
        authority=authority,
        token_standard=token_standard,
        token_owner=token_owner,
        token=token,
        metadata=metadata,
        edition=edition,
        token_record=token_record,
        payer=payer,
        authorization_rules=authorization_rules,
        authorization_rules_program=authorization_rules_program,
        authorization_data=authorization_data,
        spl_token_program=spl_token_program,
        program_id=program_id,
    )


# ---------------------------------------------------------------------------
# Legacy freeze / thaw
# ---------------------------------------------------------------------------
def _freeze_or_thaw(
    discriminator: InstructionDiscriminator,
    *,
    delegate: Pubkey,
    token_account: Pubkey,
    mint: Pubkey,
    edition: Pubkey | None,
    spl_token_program: Pubkey,
    program_id: Pubkey,
) -> Instruction:
    if edition is None:
        edition = find_master_edition_pda(mint, program_id=program_id).address
    accounts = [
        meta(delegate, signer=True, writable=True),
        meta(token_account, writable=True),
        meta(edition),
        meta(mint),
        meta(spl_token_program),
    ]
    return Instruction(program_id, instruction_data(discriminator).to_bytes(), accounts)


def freeze_delegated_account(
    *,
    delegate: Pubkey,
    token_account: Pubkey,
    mint: Pubkey,
    edition: Pubkey | None = None,
    spl_token_program: Pubkey = SPL_TOKEN_PROGRAM_ID,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    """Freeze a delegated token account of a non-programmable NFT."""
    return _freeze_or_thaw(
        InstructionDiscriminator.FREEZE_DELEGATED_ACCOUNT,
        delegate=delegate,
        token_account=token_account,
        mint=mint,
        edition=edition,
        spl_token_program=spl_token_program,
        program_id=program_id,
    )


def thaw_delegated_account(
    *,
    delegate: Pubkey,
    token_account: Pubkey,
    mint: Pubkey,
    edition: Pubkey | None = None,
    spl_token_program: Pubkey = SPL_TOKEN_PROGRAM_ID,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    return _freeze_or_thaw(
        InstructionDiscriminator.THAW_DELEGATED_ACCOUNT,
        delegate=delegate,
        token_account=token_account,
        mint=mint,
        edition=edition,
        spl_token_program=spl_token_program,
        program_id=program_id,
    )
