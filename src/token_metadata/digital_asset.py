"""
Digital asset readers.

A digital asset is the group of accounts that make up a token: its mint,
its metadata and, for non-fungibles, its master edition or print edition.
`DigitalAssetWithToken` adds a token account holding the asset and, for
programmable NFTs, that account's token record.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from solders.pubkey import Pubkey

from .constants import SPL_TOKEN_PROGRAM_ID, TOKEN_METADATA_PROGRAM_ID
from .enums import Key, TokenStandard
from .errors import AccountNotFoundError, InvalidEditionAccountError
from .instructions.accounts import NON_FUNGIBLE_STANDARDS, PROGRAMMABLE_STANDARDS
from .models import (
    Edition,
    MasterEdition,
    Metadata,
    Mint,
    TokenAccount,
    TokenRecord,
    account_key,
)
from .pda import (
    find_associated_token_pda,
    find_master_edition_pda,
    find_metadata_pda,
    find_token_record_pda,
)
from .rpc import RpcAccountReader

logger = logging.getLogger(__name__)

FUNGIBLE_STANDARDS = frozenset({TokenStandard.FUNGIBLE, TokenStandard.FUNGIBLE_ASSET})


def is_fungible(token_standard: TokenStandard) -> bool:
    return token_standard in FUNGIBLE_STANDARDS


def is_non_fungible(token_standard: TokenStandard) -> bool:
    return token_standard in NON_FUNGIBLE_STANDARDS


def is_programmable(token_standard: TokenStandard) -> bool:
    return token_standard in PROGRAMMABLE_STANDARDS


@dataclass(frozen=True, slots=True)
class DigitalAsset:
    address: Pubkey
    mint: Mint
    metadata: Metadata
    edition: MasterEdition | Edition | None = None

    @property
    def is_original(self) -> bool | None:
        """True for a master edition, False for a print, None without edition."""
        if self.edition is None:
            return None
        return isinstance(self.edition, MasterEdition)


@dataclass(frozen=True, slots=True, kw_only=True)
class DigitalAssetWithToken(DigitalAsset):
    token_address: Pubkey
    token: TokenAccount
    token_record: TokenRecord | None = None


def _require(data: bytes | None, kind: str, address: Pubkey) -> bytes:
    if data is None:
        raise AccountNotFoundError(f"{kind} account not found: {address}")
    return data


def deserialize_edition(data: bytes) -> MasterEdition | Edition:
    """Decode the account at a master edition PDA by its key byte."""
    key = account_key(data)
    if key in (Key.MASTER_EDITION_V1, Key.MASTER_EDITION_V2):
        return MasterEdition.from_bytes(data)
    if key == Key.EDITION_V1:
        return Edition.from_bytes(data)
    raise InvalidEditionAccountError(
        f"Invalid key {key.name} for edition account"
    )


def deserialize_digital_asset(
    address: Pubkey,
    mint_data: bytes,
    metadata_data: bytes,
    edition_data: bytes | None = None,
) -> DigitalAsset:
    """
    Build a `DigitalAsset` from raw account data.

    Raises:
        InvalidEditionAccountError: if the metadata names a non-fungible
            token standard and no edition account is given, or the edition
            account is neither a master nor a print edition.
    """
    mint = Mint.from_bytes(mint_data)
    metadata = Metadata.from_bytes(metadata_data)
    token_standard = metadata.token_standard
    if (
        token_standard is not None
        and is_non_fungible(token_standard)
        and edition_data is None
    ):
        raise InvalidEditionAccountError(
            f"Edition account must be provided for {token_standard.name} asset "
            f"{address}"
        )
    edition = deserialize_edition(edition_data) if edition_data is not None else None
    return DigitalAsset(address=address, mint=mint, metadata=metadata, edition=edition)


def fetch_digital_asset(
    reader: RpcAccountReader,
    mint: Pubkey,
    *,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> DigitalAsset:
    """
    Fetch the mint, metadata and edition accounts of `mint` in one request.

    Raises:
        AccountNotFoundError: if the mint or metadata account does not exist.
    """
    metadata = find_metadata_pda(mint, program_id=program_id).address
    edition = find_master_edition_pda(mint, program_id=program_id).address
    mint_data, metadata_data, edition_data = reader.get_accounts(
        [mint, metadata, edition]
    )
    return deserialize_digital_asset(
        mint,
        _require(mint_data, "Mint", mint),
        _require(metadata_data, "Metadata", metadata),
        edition_data,
    )


def fetch_metadata(
    reader: RpcAccountReader,
    mint: Pubkey,
    *,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Metadata:
    address = find_metadata_pda(mint, program_id=program_id).address
    return Metadata.from_bytes(
        _require(reader.get_account(address), "Metadata", address)
    )


def fetch_master_edition(
    reader: RpcAccountReader,
    mint: Pubkey,
    *,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> MasterEdition:
    address = find_master_edition_pda(mint, program_id=program_id).address
    return MasterEdition.from_bytes(
        _require(reader.get_account(address), "MasterEdition", address)
    )


def fetch_token_record(
    reader: RpcAccountReader,
    mint: Pubkey,
    token: Pubkey,
    *,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> TokenRecord:
    address = find_token_record_pda(mint, token, program_id=program_id).address
    return TokenRecord.from_bytes(
        _require(reader.get_account(address), "TokenRecord", address)
    )


def deserialize_digital_asset_with_token(
    address: Pubkey,
    mint_data: bytes,
    metadata_data: bytes,
    token_address: Pubkey,
    token_data: bytes,
    edition_data: bytes | None = None,
    token_record_data: bytes | None = None,
) -> DigitalAssetWithToken:
    asset = deserialize_digital_asset(address, mint_data, metadata_data, edition_data)
    return DigitalAssetWithToken(
        address=asset.address,
        mint=asset.mint,
        metadata=asset.metadata,
        edition=asset.edition,
        token_address=token_address,
        token=TokenAccount.from_bytes(token_data),
        token_record=(
            TokenRecord.from_bytes(token_record_data)
            if token_record_data is not None
            else None
        ),
    )


def fetch_digital_asset_with_token(
    reader: RpcAccountReader,
    mint: Pubkey,
    token: Pubkey,
    *,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> DigitalAssetWithToken:
    """
    Fetch a digital asset together with the token account `token`.

    Raises:
        AccountNotFoundError: if the mint, metadata or token account does not
            exist.
    """
    metadata = find_metadata_pda(mint, program_id=program_id).address
    edition = find_master_edition_pda(mint, program_id=program_id).address
    token_record = find_token_record_pda(mint, token, program_id=program_id).address
    (
        mint_data,
        metadata_data,
        edition_data,
        token_data,
        token_record_data,
    ) = reader.get_accounts([mint, metadata, edition, token, token_record])
    return deserialize_digital_asset_with_token(
        mint,
        _require(mint_data, "Mint", mint),
        _require(metadata_data, "Metadata", metadata),
        token,
        _require(token_data, "Token", token),
        edition_data,
        token_record_data,
    )


def fetch_digital_asset_with_associated_token(
    reader: RpcAccountReader,
    mint: Pubkey,
    owner: Pubkey,
    *,
    token_program_id: Pubkey = SPL_TOKEN_PROGRAM_ID,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> DigitalAssetWithToken:
    token = find_associated_token_pda(
        owner, mint, token_program_id=token_program_id
    ).address
    return fetch_digital_asset_with_token(reader, mint, token, program_id=program_id)


def fetch_all_digital_asset_with_token_by_owner(
    reader: RpcAccountReader,
    owner: Pubkey,
    *,
    mint: Pubkey | None = None,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> list[DigitalAssetWithToken]:
    """
    Fetch every digital asset held by `owner`, optionally only for `mint`.

    Empty token accounts and tokens without a mint or metadata account are
    skipped.
    """
    tokens: list[tuple[Pubkey, TokenAccount]] = []
    for address, data in reader.get_token_accounts_by_owner(owner, mint=mint):
        token = TokenAccount.from_bytes(data)
        if token.amount > 0:
            tokens.append((address, token))

    to_fetch: list[Pubkey] = []
    for address, token in tokens:
        to_fetch.extend(
            [
                token.mint,
                find_metadata_pda(token.mint, program_id=program_id).address,
                find_master_edition_pda(token.mint, program_id=program_id).address,
                find_token_record_pda(
                    token.mint, address, program_id=program_id
                ).address,
            ]
        )
    accounts = reader.get_accounts(to_fetch)

    assets: list[DigitalAssetWithToken] = []
    for i, (address, token) in enumerate(tokens):
        mint_data, metadata_data, edition_data, token_record_data = accounts[
            4 * i : 4 * i + 4
        ]
        if mint_data is None or metadata_data is None:
            logger.debug("Skipping token %s without mint or metadata", address)
            continue
        asset = deserialize_digital_asset(
            token.mint, mint_data, metadata_data, edition_data
        )
        assets.append(
            DigitalAssetWithToken(
                address=asset.address,
                mint=asset.mint,
                metadata=asset.metadata,
                edition=asset.edition,
                token_address=address,
                token=token,
                token_record=(
                    TokenRecord.from_bytes(token_record_data)
                    if token_record_data is not None
                    else None
                ),
            )
        )
    return assets
