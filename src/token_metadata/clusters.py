from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final, Literal

from .constants import TOKEN_METADATA_PROGRAM_ID_STR

# ---------------------------------------------------------------------------
# Public RPC endpoints
# ---------------------------------------------------------------------------
MAINNET_BETA_RPC_URL: Final[str] = "https://api.mainnet-beta.solana.com"
DEVNET_RPC_URL: Final[str] = "https://api.devnet.solana.com"
TESTNET_RPC_URL: Final[str] = "https://api.testnet.solana.com"
LOCALNET_RPC_URL: Final[str] = "http://127.0.0.1:8899"


@dataclass(frozen=True, slots=True)
class Cluster:
    """
    A known Solana cluster.

    The Token Metadata program is deployed at the same address on every public
    cluster; localnet validators load it under that address too.
    """

    name: Literal["mainnet-beta", "devnet", "testnet", "localnet"]
    rpc_url: str
    program_id: str = TOKEN_METADATA_PROGRAM_ID_STR


DEFAULT_CLUSTERS: Final[Mapping[str, Cluster]] = {
    "mainnet-beta": Cluster(name="mainnet-beta", rpc_url=MAINNET_BETA_RPC_URL),
    "devnet": Cluster(name="devnet", rpc_url=DEVNET_RPC_URL),
    "testnet": Cluster(name="testnet", rpc_url=TESTNET_RPC_URL),
    "localnet": Cluster(name="localnet", rpc_url=LOCALNET_RPC_URL),
}
