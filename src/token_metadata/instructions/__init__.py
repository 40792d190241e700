# ruff: noqa: RUF022
"""Instruction builders for the Token Metadata program."""

from .args import (
    CreateV1Args,
    DelegateArgsKind,
    InstructionDiscriminator,
    PrintArgsKind,
    RevokeArgsKind,
    UpdateArgs,
    UpdateArgsKind,
    VerificationArgsKind,
)
from .collection import (
    approve_collection_authority,
    revoke_collection_authority,
    verify_collection,
)
from .delegate import (
    DelegateAccounts,
    delegate,
    delegate_authority_item_v1,
    delegate_collection_item_v1,
    delegate_collection_v1,
    delegate_data_item_v1,
    delegate_data_v1,
    delegate_locked_transfer_v1,
    delegate_print_delegate_v1,
    delegate_programmable_config_item_v1,
    delegate_programmable_config_v1,
    delegate_sale_v1,
    delegate_staking_v1,
    delegate_standard_v1,
    delegate_transfer_v1,
    delegate_utility_v1,
    revoke,
    revoke_authority_item_v1,
    revoke_collection_item_v1,
    revoke_collection_v1,
    revoke_data_item_v1,
    revoke_data_v1,
    revoke_locked_transfer_v1,
    revoke_migration_v1,
    revoke_print_delegate_v1,
    revoke_programmable_config_item_v1,
    revoke_programmable_config_v1,
    revoke_sale_v1,
    revoke_staking_v1,
    revoke_standard_v1,
    revoke_transfer_v1,
    revoke_utility_v1,
)
from .escrow import close_escrow_account, create_escrow_account, transfer_out_of_escrow
from .metadata import (
    create_v1,
    update,
    update_as_authority_item_delegate_v2,
    update_as_collection_delegate_v2,
    update_as_collection_item_delegate_v2,
    update_as_data_delegate_v2,
    update_as_data_item_delegate_v2,
    update_as_programmable_config_delegate_v2,
    update_as_programmable_config_item_delegate_v2,
    update_as_update_authority_v2,
    update_v1,
)
from .editions import print_v1, print_v2
from .token import (
    burn_v1,
    freeze_delegated_account,
    lock_v1,
    mint_v1,
    thaw_delegated_account,
    transfer_v1,
    unlock_v1,
)
from .verify import (
    unverify_collection_v1,
    unverify_creator_v1,
    verify_collection_v1,
    verify_creator_v1,
)

__all__ = [
    # Args
    "CreateV1Args",
    "DelegateArgsKind",
    "InstructionDiscriminator",
    "PrintArgsKind",
    "RevokeArgsKind",
    "UpdateArgs",
    "UpdateArgsKind",
    "VerificationArgsKind",
    # Create / update
    "create_v1",
    "update",
    "update_v1",
    "update_as_update_authority_v2",
    "update_as_authority_item_delegate_v2",
    "update_as_collection_delegate_v2",
    "update_as_data_delegate_v2",
    "update_as_programmable_config_delegate_v2",
    "update_as_data_item_delegate_v2",
    "update_as_collection_item_delegate_v2",
    "update_as_programmable_config_item_delegate_v2",
    # Token operations
    "mint_v1",
    "burn_v1",
    "transfer_v1",
    "lock_v1",
    "unlock_v1",
    "freeze_delegated_account",
    "thaw_delegated_account",
    # Delegate
    "DelegateAccounts",
    "delegate",
    "delegate_collection_v1",
    "delegate_sale_v1",
    "delegate_transfer_v1",
    "delegate_data_v1",
    "delegate_utility_v1",
    "delegate_staking_v1",
    "delegate_standard_v1",
    "delegate_locked_transfer_v1",
    "delegate_programmable_config_v1",
    "delegate_authority_item_v1",
    "delegate_data_item_v1",
    "delegate_collection_item_v1",
    "delegate_programmable_config_item_v1",
    "delegate_print_delegate_v1",
    # Revoke
    "revoke",
    "revoke_collection_v1",
    "revoke_sale_v1",
    "revoke_transfer_v1",
    "revoke_data_v1",
    "revoke_utility_v1",
    "revoke_staking_v1",
    "revoke_standard_v1",
    "revoke_locked_transfer_v1",
    "revoke_programmable_config_v1",
    "revoke_migration_v1",
    "revoke_authority_item_v1",
    "revoke_data_item_v1",
    "revoke_collection_item_v1",
    "revoke_programmable_config_item_v1",
    "revoke_print_delegate_v1",
    # Verification
    "verify_creator_v1",
    "verify_collection_v1",
    "unverify_creator_v1",
    "unverify_collection_v1",
    # Collection authority
    "approve_collection_authority",
    "revoke_collection_authority",
    "verify_collection",
    # Print
    "print_v1",
    "print_v2",
    # Escrow
    "create_escrow_account",
    "close_escrow_account",
    "transfer_out_of_escrow",
]
