from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from solana.rpc.types import TokenAccountOpts
from solders.pubkey import Pubkey

from .constants import SPL_TOKEN_PROGRAM_ID

if TYPE_CHECKING:  # pragma: no cover
    from solana.rpc.api import Client

logger = logging.getLogger(__name__)

# getMultipleAccounts accepts at most this many keys per request.
MAX_MULTIPLE_ACCOUNTS = 100


@dataclass(slots=True)
class RpcAccountReader:
    """
    Read raw account data through a Solana JSON-RPC client.

    The only required client methods are:
    - `get_multiple_accounts(pubkeys)`
    - `get_token_accounts_by_owner(owner, opts)`

    Missing accounts come back as None; transport errors propagate.
    """

    client: Client

    def get_accounts(self, addresses: Sequence[Pubkey]) -> list[bytes | None]:
        """
        Fetch the data of several accounts, in request order.

        Requests are split into batches of `MAX_MULTIPLE_ACCOUNTS`.
        """
        out: list[bytes | None] = []
        for start in range(0, len(addresses), MAX_MULTIPLE_ACCOUNTS):
            batch = list(addresses[start : start + MAX_MULTIPLE_ACCOUNTS])
            logger.debug("Fetching %d accounts", len(batch))
            resp = self.client.get_multiple_accounts(batch)
            accounts = list(resp.value or [])
            if len(accounts) != len(batch):
                raise RuntimeError(
                    f"Expected {len(batch)} accounts from getMultipleAccounts, "
                    f"got {len(accounts)}"
                )
            out.extend(None if a is None else bytes(a.data) for a in accounts)
        return out

    def get_account(self, address: Pubkey) -> bytes | None:
        return self.get_accounts([address])[0]

    def get_token_accounts_by_owner(
        self,
        owner: Pubkey,
        *,
        mint: Pubkey | None = None,
        token_program_id: Pubkey = SPL_TOKEN_PROGRAM_ID,
    ) -> list[tuple[Pubkey, bytes]]:
        """
        Return `(address, data)` of the token accounts owned by `owner`.

        Filtered by `mint` when given, otherwise by token program.
        """
        if mint is not None:
            opts = TokenAccountOpts(mint=mint)
        else:
            opts = TokenAccountOpts(program_id=token_program_id)
        logger.debug("Fetching token accounts of %s", owner)
        resp = self.client.get_token_accounts_by_owner(owner, opts)
        return [(keyed.pubkey, bytes(keyed.account.data)) for keyed in resp.value]
