"""Factory helpers for Token Metadata SDK tests."""

from collections.abc import Sequence
from types import SimpleNamespace
from unittest.mock import Mock

from solana.rpc.api import Client
from solders.pubkey import Pubkey

from token_metadata.enums import TokenStandard
from token_metadata.models import (
    Collection,
    Creator,
    Edition,
    MasterEdition,
    Metadata,
    Mint,
    TokenAccount,
)


def make_pubkey(seed: int) -> Pubkey:
    """Deterministic test pubkey: 32 copies of `seed`."""
    return Pubkey.from_bytes(bytes([seed]) * 32)


class RecordingDerive:
    """
    Stand-in for `Pubkey.find_program_address` that records its inputs.

    Returns a fixed address and bump so tests can assert on the seeds alone.
    """

    def __init__(self, address: Pubkey | None = None, bump: int = 254) -> None:
        self.address = address if address is not None else make_pubkey(0xAA)
        self.bump = bump
        self.calls: list[tuple[list[bytes], Pubkey]] = []

    def __call__(self, seeds: Sequence[bytes], program_id: Pubkey) -> tuple[Pubkey, int]:
        self.calls.append((list(seeds), program_id))
        return self.address, self.bump

    @property
    def seeds(self) -> list[bytes]:
        assert self.calls, "derive was never called"
        return self.calls[-1][0]


def make_metadata(
    mint: Pubkey,
    *,
    update_authority: Pubkey | None = None,
    token_standard: TokenStandard | None = TokenStandard.NON_FUNGIBLE,
    name: str = "My NFT",
    symbol: str = "MNFT",
    uri: str = "https://example.com/my-nft.json",
) -> Metadata:
    update_authority = update_authority if update_authority is not None else make_pubkey(2)
    return Metadata(
        update_authority=update_authority,
        mint=mint,
        name=name,
        symbol=symbol,
        uri=uri,
        seller_fee_basis_points=500,
        creators=(Creator(address=update_authority, verified=True, share=100),),
        edition_nonce=255,
        token_standard=token_standard,
        collection=Collection(verified=False, key=make_pubkey(9)),
    )


def make_mint(*, supply: int = 1, decimals: int = 0) -> Mint:
    return Mint(
        supply=supply,
        decimals=decimals,
        mint_authority=make_pubkey(7),
        freeze_authority=make_pubkey(7),
    )


def make_master_edition(max_supply: int | None = 0) -> MasterEdition:
    return MasterEdition(supply=0, max_supply=max_supply)


def make_print_edition(parent: Pubkey, edition: int = 1) -> Edition:
    return Edition(parent=parent, edition=edition)


def make_token_account(mint: Pubkey, owner: Pubkey, amount: int = 1) -> TokenAccount:
    return TokenAccount(mint=mint, owner=owner, amount=amount)


def make_rpc_client(
    accounts: dict[Pubkey, bytes] | None = None,
    token_accounts: Sequence[tuple[Pubkey, bytes]] = (),
) -> Mock:
    """
    `Mock(spec=Client)` answering account reads from in-memory data.

    Unknown addresses are returned as missing accounts.
    """
    accounts = accounts or {}
    client = Mock(spec=Client)

    def get_multiple_accounts(pubkeys: Sequence[Pubkey]) -> SimpleNamespace:
        value = [
            SimpleNamespace(data=accounts[k]) if k in accounts else None
            for k in pubkeys
        ]
        return SimpleNamespace(value=value)

    client.get_multiple_accounts.side_effect = get_multiple_accounts
    client.get_token_accounts_by_owner.return_value = SimpleNamespace(
        value=[
            SimpleNamespace(pubkey=address, account=SimpleNamespace(data=data))
            for address, data in token_accounts
        ]
    )
    return client
