"""
High-level builders composed from the raw instructions.

They fill in the argument defaults a wallet would normally choose: the update
authority as sole verified creator, a zero print supply for non-fungibles and
zero decimals for fungibles.
"""

from __future__ import annotations

from typing import Any

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

from .constants import SPL_TOKEN_PROGRAM_ID, TOKEN_METADATA_PROGRAM_ID
from .enums import HolderDelegateRole, TokenStandard
from .instructions.accounts import is_non_fungible_standard, or_default
from .instructions.args import CreateV1Args, PrintArgsKind, print_data
from .instructions.editions import print_accounts
from .instructions.metadata import create_v1
from .instructions.token import mint_v1
from .models import Collection, CollectionDetails, Creator, PrintSupply, Uses
from .pda import find_holder_delegate_record_pda


def create_args(
    *,
    name: str,
    uri: str,
    seller_fee_basis_points: int,
    update_authority: Pubkey,
    token_standard: TokenStandard = TokenStandard.NON_FUNGIBLE,
    symbol: str = "",
    creators: tuple[Creator, ...] | None = None,
    primary_sale_happened: bool = False,
    is_mutable: bool = True,
    is_collection: bool = False,
    collection: Collection | None = None,
    uses: Uses | None = None,
    collection_details: CollectionDetails | None = None,
    rule_set: Pubkey | None = None,
    decimals: int | None = None,
    print_supply: PrintSupply | None = None,
) -> CreateV1Args:
    """
    Build `CreateV1Args` with wallet defaults.

    - `creators`: `update_authority` alone, verified, with a 100 % share
    - `collection_details`: V1 with size 0 when `is_collection`
    - `print_supply`: Zero for non-fungible standards
    - `decimals`: 0 for fungible standards
    """
    non_fungible = is_non_fungible_standard(token_standard)
    if creators is None:
        creators = (Creator(address=update_authority, verified=True, share=100),)
    if collection_details is None and is_collection:
        collection_details = CollectionDetails.v1(0)
    if print_supply is None and non_fungible:
        print_supply = PrintSupply.zero()
    if decimals is None and not non_fungible:
        decimals = 0
    return CreateV1Args(
        name=name,
        uri=uri,
        seller_fee_basis_points=seller_fee_basis_points,
        symbol=symbol,
        creators=creators,
        primary_sale_happened=primary_sale_happened,
        is_mutable=is_mutable,
        token_standard=token_standard,
        collection=collection,
        uses=uses,
        collection_details=collection_details,
        rule_set=rule_set,
        decimals=decimals,
        print_supply=print_supply,
    )


def create(
    *,
    mint: Pubkey,
    authority: Pubkey,
    name: str,
    uri: str,
    seller_fee_basis_points: int,
    update_authority: Pubkey | None = None,
    payer: Pubkey | None = None,
    mint_is_signer: bool = True,
    spl_token_program: Pubkey = SPL_TOKEN_PROGRAM_ID,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
    **fields: Any,
) -> Instruction:
    """`create_v1` with `create_args` defaults; extra keywords go to `create_args`."""
    update_authority = or_default(update_authority, authority)
    args = create_args(
        name=name,
        uri=uri,
        seller_fee_basis_points=seller_fee_basis_points,
        update_authority=update_authority,
        **fields,
    )
    return create_v1(
        args,
        mint=mint,
        authority=authority,
        payer=payer,
        update_authority=update_authority,
        mint_is_signer=mint_is_signer,
        spl_token_program=spl_token_program,
        program_id=program_id,
    )


def create_and_mint(
    *,
    mint: Pubkey,
    authority: Pubkey,
    name: str,
    uri: str,
    seller_fee_basis_points: int,
    amount: int = 1,
    token_standard: TokenStandard = TokenStandard.NON_FUNGIBLE,
    token_owner: Pubkey | None = None,
    update_authority: Pubkey | None = None,
    payer: Pubkey | None = None,
    spl_token_program: Pubkey = SPL_TOKEN_PROGRAM_ID,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
    **fields: Any,
) -> list[Instruction]:
    """Create the asset then mint `amount` tokens to `token_owner`."""
    return [
        create(
            mint=mint,
            authority=authority,
            name=name,
            uri=uri,
            seller_fee_basis_points=seller_fee_basis_points,
            update_authority=update_authority,
            payer=payer,
            token_standard=token_standard,
            spl_token_program=spl_token_program,
            program_id=program_id,
            **fields,
        ),
        mint_v1(
            mint=mint,
            authority=authority,
            amount=amount,
            token_standard=token_standard,
            token_owner=token_owner,
            payer=payer,
            spl_token_program=spl_token_program,
            program_id=program_id,
        ),
    ]


def create_nft(**kwargs: Any) -> list[Instruction]:
    return create_and_mint(
        token_standard=TokenStandard.NON_FUNGIBLE, amount=1, **kwargs
    )


def create_programmable_nft(**kwargs: Any) -> list[Instruction]:
    return create_and_mint(
        token_standard=TokenStandard.PROGRAMMABLE_NON_FUNGIBLE, amount=1, **kwargs
    )


def create_fungible(**kwargs: Any) -> Instruction:
    return create(token_standard=TokenStandard.FUNGIBLE, **kwargs)


def create_fungible_asset(**kwargs: Any) -> Instruction:
    return create(token_standard=TokenStandard.FUNGIBLE_ASSET, **kwargs)


def print_as_delegate(
    *,
    master_edition_mint: Pubkey,
    edition_mint: Pubkey,
    edition_number: int,
    master_token_account_owner: Pubkey,
    update_authority: Pubkey,
    payer: Pubkey,
    holder_delegate_record: Pubkey | None = None,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
    **accounts: Any,
) -> Instruction:
    """
    Print an edition as the print delegate `payer` of the master token owner.

    The `print_v1` layout with the delegate as signer, followed by the holder
    delegate record as a writable remaining account. The master token owner
    does not sign.
    """
    if holder_delegate_record is None:
        holder_delegate_record = find_holder_delegate_record_pda(
            master_edition_mint,
            HolderDelegateRole.PRINT_DELEGATE,
            master_token_account_owner,
            payer,
            program_id=program_id,
        ).address
    metas = print_accounts(
        master_edition_mint=master_edition_mint,
        edition_mint=edition_mint,
        edition_number=edition_number,
        master_token_account_owner=master_token_account_owner,
        update_authority=update_authority,
        signer=payer,
        payer=payer,
        program_id=program_id,
        **accounts,
    )
    metas.append(
        AccountMeta(pubkey=holder_delegate_record, is_signer=False, is_writable=True)
    )
    data = print_data(PrintArgsKind.V1, edition_number)
    return Instruction(program_id, data, metas)
