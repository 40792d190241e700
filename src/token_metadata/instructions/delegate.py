"""
Delegate and revoke instructions.

Delegates come in three scopes, each stored in a different record account:

- token delegates (sale, transfer, utility, staking, standard, locked
  transfer, migration) live in the token record of the delegated token
  account;
- metadata delegates (collection, data, programmable config and their
  ``item`` variants, authority item) live in a metadata delegate record keyed
  by the update authority;
- holder delegates (print) live in a holder delegate record keyed by the
  token owner.

Delegate and revoke share one account layout; only the instruction data
differs.
"""

from __future__ import annotations

from dataclasses import dataclass

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

from ..constants import (
    SPL_TOKEN_PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
    SYSVAR_INSTRUCTIONS_ID,
    TOKEN_AUTH_RULES_PROGRAM_ID,
    TOKEN_METADATA_PROGRAM_ID,
)
from ..enums import HolderDelegateRole, MetadataDelegateRole, TokenStandard
from ..models import AuthorizationData
from ..pda import (
    find_associated_token_pda,
    find_holder_delegate_record_pda,
    find_master_edition_pda,
    find_metadata_delegate_record_pda,
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
from .args import DelegateArgsKind, RevokeArgsKind, delegate_data, revoke_data


@dataclass(frozen=True, slots=True)
class DelegateAccounts:
    """
    Accounts of a delegate or revoke instruction.

    Any account left as None is resolved from `mint`, `authority` and the
    delegate scope; optional accounts that stay None are passed as the
    program id.
    """

    mint: Pubkey
    authority: Pubkey
    delegate: Pubkey
    token_standard: TokenStandard = TokenStandard.NON_FUNGIBLE
    delegate_record: Pubkey | None = None
    metadata: Pubkey | None = None
    master_edition: Pubkey | None = None
    token_record: Pubkey | None = None
    token: Pubkey | None = None
    token_owner: Pubkey | None = None
    update_authority: Pubkey | None = None
    payer: Pubkey | None = None
    spl_token_program: Pubkey | None = None
    authorization_rules: Pubkey | None = None
    authorization_rules_program: Pubkey | None = None


_TOKEN_DELEGATES = frozenset(
    {
        DelegateArgsKind.SALE_V1,
        DelegateArgsKind.TRANSFER_V1,
        DelegateArgsKind.UTILITY_V1,
        DelegateArgsKind.STAKING_V1,
        DelegateArgsKind.STANDARD_V1,
        DelegateArgsKind.LOCKED_TRANSFER_V1,
    }
)

_METADATA_DELEGATE_ROLES: dict[DelegateArgsKind, MetadataDelegateRole] = {
    DelegateArgsKind.COLLECTION_V1: MetadataDelegateRole.COLLECTION,
    DelegateArgsKind.DATA_V1: MetadataDelegateRole.DATA,
    DelegateArgsKind.PROGRAMMABLE_CONFIG_V1: MetadataDelegateRole.PROGRAMMABLE_CONFIG,
    DelegateArgsKind.AUTHORITY_ITEM_V1: MetadataDelegateRole.AUTHORITY_ITEM,
    DelegateArgsKind.DATA_ITEM_V1: MetadataDelegateRole.DATA_ITEM,
    DelegateArgsKind.COLLECTION_ITEM_V1: MetadataDelegateRole.COLLECTION_ITEM,
    DelegateArgsKind.PROGRAMMABLE_CONFIG_ITEM_V1: (
        MetadataDelegateRole.PROGRAMMABLE_CONFIG_ITEM
    ),
}

# Revoke variants are numbered differently (MIGRATION_V1 is inserted at 9),
# so they are matched to their delegate counterpart by name.
_REVOKE_TO_DELEGATE: dict[RevokeArgsKind, DelegateArgsKind] = {
    kind: DelegateArgsKind[kind.name]
    for kind in RevokeArgsKind
    if kind.name in DelegateArgsKind.__members__
}


def _scope_kind(kind: DelegateArgsKind | RevokeArgsKind) -> DelegateArgsKind | None:
    if isinstance(kind, RevokeArgsKind):
        return _REVOKE_TO_DELEGATE.get(kind)
    return kind


def delegate_accounts(
    kind: DelegateArgsKind | RevokeArgsKind,
    a: DelegateAccounts,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> list[AccountMeta]:
    """Resolve and order the account metas of a delegate/revoke instruction."""
    scope = _scope_kind(kind)
    # Revoke kinds share integer values with unrelated delegate kinds, so
    # classification goes through the name-matched scope.
    is_token_delegate = (
        kind is RevokeArgsKind.MIGRATION_V1 or scope in _TOKEN_DELEGATES
    )
    is_holder_delegate = scope == DelegateArgsKind.PRINT_DELEGATE_V1

    token = a.token
    spl_token_program = a.spl_token_program
    token_owner = or_default(a.token_owner, a.authority)
    if is_token_delegate or is_holder_delegate:
        spl_token_program = or_default(spl_token_program, SPL_TOKEN_PROGRAM_ID)
        if token is None:
            token = find_associated_token_pda(
                token_owner, a.mint, token_program_id=spl_token_program
            ).address

    delegate_record = a.delegate_record
    if delegate_record is None:
        if is_token_delegate:
            delegate_record = find_token_record_pda(
                a.mint, token, program_id=program_id  # type: ignore[arg-type]
            ).address
        elif is_holder_delegate:
            delegate_record = find_holder_delegate_record_pda(
                a.mint,
                HolderDelegateRole.PRINT_DELEGATE,
                token_owner,
                a.delegate,
                program_id=program_id,
            ).address
        else:
            delegate_record = find_metadata_delegate_record_pda(
                a.mint,
                _METADATA_DELEGATE_ROLES[scope],  # type: ignore[index]
                or_default(a.update_authority, a.authority),
                a.delegate,
                program_id=program_id,
            ).address

    metadata = a.metadata
    if metadata is None:
        metadata = find_metadata_pda(a.mint, program_id=program_id).address
    master_edition = a.master_edition
    if master_edition is None and is_non_fungible_standard(a.token_standard):
        master_edition = find_master_edition_pda(a.mint, program_id=program_id).address
    token_record = a.token_record
    if (
        token_record is None
        and token is not None
        and is_programmable_standard(a.token_standard)
    ):
        token_record = find_token_record_pda(
            a.mint, token, program_id=program_id
        ).address
    authorization_rules_program = a.authorization_rules_program
    if authorization_rules_program is None and a.authorization_rules is not None:
        authorization_rules_program = TOKEN_AUTH_RULES_PROGRAM_ID

    return [
        meta(delegate_record, writable=True),
        meta(a.delegate),
        meta(metadata, writable=True),
        optional_meta(master_edition, program_id),
        optional_meta(token_record, program_id, writable=True),
        meta(a.mint),
        optional_meta(token, program_id, writable=True),
        meta(a.authority, signer=True),
        meta(or_default(a.payer, a.authority), signer=True, writable=True),
        meta(SYSTEM_PROGRAM_ID),
        meta(SYSVAR_INSTRUCTIONS_ID),
        optional_meta(spl_token_program, program_id),
        optional_meta(authorization_rules_program, program_id),
        optional_meta(a.authorization_rules, program_id),
    ]


def delegate(
    kind: DelegateArgsKind,
    accounts: DelegateAccounts,
    *,
    amount: int = 1,
    locked_address: Pubkey | None = None,
    authorization_data: AuthorizationData | None = None,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    data = delegate_data(
        kind,
        amount=amount,
        locked_address=locked_address,
        authorization_data=authorization_data,
    )
    return Instruction(program_id, data, delegate_accounts(kind, accounts, program_id))


def revoke(
    kind: RevokeArgsKind,
    accounts: DelegateAccounts,
    *,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    return Instruction(
        program_id, revoke_data(kind), delegate_accounts(kind, accounts, program_id)
    )


# ---------------------------------------------------------------------------
# Delegate
# ---------------------------------------------------------------------------
def delegate_collection_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return delegate(DelegateArgsKind.COLLECTION_V1, accounts, **kwargs)


def delegate_sale_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return delegate(DelegateArgsKind.SALE_V1, accounts, **kwargs)


def delegate_transfer_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return delegate(DelegateArgsKind.TRANSFER_V1, accounts, **kwargs)


def delegate_data_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return delegate(DelegateArgsKind.DATA_V1, accounts, **kwargs)


def delegate_utility_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return delegate(DelegateArgsKind.UTILITY_V1, accounts, **kwargs)


def delegate_staking_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return delegate(DelegateArgsKind.STAKING_V1, accounts, **kwargs)


def delegate_standard_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return delegate(DelegateArgsKind.STANDARD_V1, accounts, **kwargs)


def delegate_locked_transfer_v1(
    accounts: DelegateAccounts, *, locked_address: Pubkey, **kwargs
) -> Instruction:
    return delegate(
        DelegateArgsKind.LOCKED_TRANSFER_V1,
        accounts,
        locked_address=locked_address,
        **kwargs,
    )


def delegate_programmable_config_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return delegate(DelegateArgsKind.PROGRAMMABLE_CONFIG_V1, accounts, **kwargs)


def delegate_authority_item_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return delegate(DelegateArgsKind.AUTHORITY_ITEM_V1, accounts, **kwargs)


def delegate_data_item_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return delegate(DelegateArgsKind.DATA_ITEM_V1, accounts, **kwargs)


def delegate_collection_item_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return delegate(DelegateArgsKind.COLLECTION_ITEM_V1, accounts, **kwargs)


def delegate_programmable_config_item_v1(
    accounts: DelegateAccounts, **kwargs
) -> Instruction:
    return delegate(DelegateArgsKind.PROGRAMMABLE_CONFIG_ITEM_V1, accounts, **kwargs)


def delegate_print_delegate_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return delegate(DelegateArgsKind.PRINT_DELEGATE_V1, accounts, **kwargs)


# ---------------------------------------------------------------------------
# Revoke
# ---------------------------------------------------------------------------
def revoke_collection_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return revoke(RevokeArgsKind.COLLECTION_V1, accounts, **kwargs)


def revoke_sale_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return revoke(RevokeArgsKind.SALE_V1, accounts, **kwargs)


def revoke_transfer_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return revoke(RevokeArgsKind.TRANSFER_V1, accounts, **kwargs)


def revoke_data_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return revoke(RevokeArgsKind.DATA_V1, accounts, **kwargs)


def revoke_utility_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return revoke(RevokeArgsKind.UTILITY_V1, accounts, **kwargs)


def revoke_staking_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return revoke(RevokeArgsKind.STAKING_V1, accounts, **kwargs)


def revoke_standard_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return revoke(RevokeArgsKind.STANDARD_V1, accounts, **kwargs)


def revoke_locked_transfer_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return revoke(RevokeArgsKind.LOCKED_TRANSFER_V1, accounts, **kwargs)


def revoke_programmable_config_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return revoke(RevokeArgsKind.PROGRAMMABLE_CONFIG_V1, accounts, **kwargs)


def revoke_migration_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return revoke(RevokeArgsKind.MIGRATION_V1, accounts, **kwargs)


def revoke_authority_item_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return revoke(RevokeArgsKind.AUTHORITY_ITEM_V1, accounts, **kwargs)


def revoke_data_item_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return revoke(RevokeArgsKind.DATA_ITEM_V1, accounts, **kwargs)


def revoke_collection_item_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return revoke(RevokeArgsKind.COLLECTION_ITEM_V1, accounts, **kwargs)


def revoke_programmable_config_item_v1(
    accounts: DelegateAccounts, **kwargs
) -> Instruction:
    return revoke(RevokeArgsKind.PROGRAMMABLE_CONFIG_ITEM_V1, accounts, **kwargs)


def revoke_print_delegate_v1(accounts: DelegateAccounts, **kwargs) -> Instruction:
    return revoke(RevokeArgsKind.PRINT_DELEGATE_V1, accounts, **kwargs)
