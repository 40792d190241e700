from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from solana.rpc.api import Client
from solana.rpc.commitment import Commitment
from solders.instruction import Instruction
from solders.pubkey import Pubkey

from . import digital_asset, helpers, instructions
from .clusters import DEFAULT_CLUSTERS
from .constants import TOKEN_METADATA_PROGRAM_ID
from .errors import MissingRpcClientError
from .instructions import (
    CreateV1Args,
    DelegateAccounts,
    DelegateArgsKind,
    RevokeArgsKind,
    UpdateArgs,
)
from .json_metadata import fetch_json_metadata
from .models import MasterEdition, Metadata
from .rpc import RpcAccountReader

# ---------------------------------------------------------------------------
# Environment variables
# ---------------------------------------------------------------------------
ENV_RPC_URL = "SOLANA_RPC_URL"
ENV_PROGRAM_ID = "TOKEN_METADATA_PROGRAM_ID"
ENV_IDENTITY = "TOKEN_METADATA_IDENTITY"


def _env_pubkey(environ: Mapping[str, str], name: str) -> Pubkey | None:
    raw = environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return Pubkey.from_string(raw)
    except ValueError as e:
        raise ValueError(f"{name} is not a valid base58 pubkey: {raw!r}") from e


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """
    Configuration of a `TokenMetadataClient`.

    `identity` is the default authority and, unless `payer` is set, the
    default fee payer of the instructions the client builds.
    """

    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID
    identity: Pubkey | None = None
    payer: Pubkey | None = None
    rpc_url: str | None = None
    commitment: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        env = os.environ if environ is None else environ
        program_id = _env_pubkey(env, ENV_PROGRAM_ID)
        return cls(
            program_id=program_id if program_id is not None else TOKEN_METADATA_PROGRAM_ID,
            identity=_env_pubkey(env, ENV_IDENTITY),
            rpc_url=env.get(ENV_RPC_URL, "").strip() or None,
        )


_DELEGATE_ACCOUNT_FIELDS = tuple(f.name for f in fields(DelegateAccounts))


class TokenMetadataClient:
    """
    Facade over the account readers and the instruction builders.

    Reads need an RPC client, given directly or built from `config.rpc_url`.
    Builders fill `authority` and `payer` from the configured identity when
    the caller leaves them out.
    """

    def __init__(
        self, *, config: ClientConfig | None = None, client: Client | None = None
    ) -> None:
        self.config = config if config is not None else ClientConfig()
        if client is None and self.config.rpc_url is not None:
            commitment = (
                Commitment(self.config.commitment)
                if self.config.commitment is not None
                else None
            )
            client = Client(self.config.rpc_url, commitment=commitment)
        self._reader: RpcAccountReader | None = (
            RpcAccountReader(client) if client is not None else None
        )

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> TokenMetadataClient:
        return cls(config=ClientConfig.from_env())

    @classmethod
    def from_cluster(
        cls, name: str, *, identity: Pubkey | None = None
    ) -> TokenMetadataClient:
        cluster = DEFAULT_CLUSTERS.get(name)
        if cluster is None:
            raise ValueError(
                f"Unknown cluster {name!r}; expected one of {sorted(DEFAULT_CLUSTERS)}"
            )
        return cls(
            config=ClientConfig(
                program_id=Pubkey.from_string(cluster.program_id),
                identity=identity,
                rpc_url=cluster.rpc_url,
            )
        )

    @property
    def reader(self) -> RpcAccountReader:
        if self._reader is None:
            raise MissingRpcClientError(
                "Read operations require an RPC client or rpc_url"
            )
        return self._reader

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def fetch_digital_asset(self, mint: Pubkey) -> digital_asset.DigitalAsset:
        return digital_asset.fetch_digital_asset(
            self.reader, mint, program_id=self.config.program_id
        )

    def fetch_digital_asset_with_token(
        self, mint: Pubkey, token: Pubkey
    ) -> digital_asset.DigitalAssetWithToken:
        return digital_asset.fetch_digital_asset_with_token(
            self.reader, mint, token, program_id=self.config.program_id
        )

    def fetch_digital_asset_with_associated_token(
        self, mint: Pubkey, owner: Pubkey
    ) -> digital_asset.DigitalAssetWithToken:
        return digital_asset.fetch_digital_asset_with_associated_token(
            self.reader, mint, owner, program_id=self.config.program_id
        )

    def fetch_all_digital_asset_with_token_by_owner(
        self, owner: Pubkey, *, mint: Pubkey | None = None
    ) -> list[digital_asset.DigitalAssetWithToken]:
        return digital_asset.fetch_all_digital_asset_with_token_by_owner(
            self.reader, owner, mint=mint, program_id=self.config.program_id
        )

    def fetch_metadata(self, mint: Pubkey) -> Metadata:
        return digital_asset.fetch_metadata(
            self.reader, mint, program_id=self.config.program_id
        )

    def fetch_master_edition(self, mint: Pubkey) -> MasterEdition:
        return digital_asset.fetch_master_edition(
            self.reader, mint, program_id=self.config.program_id
        )

    def fetch_json_metadata(self, uri: str) -> dict[str, Any]:
        return fetch_json_metadata(uri)

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    def _signers(self, kwargs: dict[str, Any], *, with_payer: bool = True) -> dict[str, Any]:
        """Fill `authority`, `payer` and `program_id` from the configuration."""
        out = dict(kwargs)
        if out.get("authority") is None:
            if self.config.identity is None:
                raise ValueError("No authority given and no identity configured")
            out["authority"] = self.config.identity
        if with_payer and out.get("payer") is None and self.config.payer is not None:
            out["payer"] = self.config.payer
        out.setdefault("program_id", self.config.program_id)
        return out

    def _delegate_accounts(
        self, kwargs: dict[str, Any]
    ) -> tuple[DelegateAccounts, dict[str, Any]]:
        out = self._signers(kwargs)
        accounts = DelegateAccounts(
            **{name: out.pop(name) for name in _DELEGATE_ACCOUNT_FIELDS if name in out}
        )
        return accounts, out

    # Helpers

    def create_and_mint(self, **kwargs: Any) -> list[Instruction]:
        return helpers.create_and_mint(**self._signers(kwargs))

    def create_nft(self, **kwargs: Any) -> list[Instruction]:
        return helpers.create_nft(**self._signers(kwargs))

    def create_programmable_nft(self, **kwargs: Any) -> list[Instruction]:
        return helpers.create_programmable_nft(**self._signers(kwargs))

    def create_fungible(self, **kwargs: Any) -> Instruction:
        return helpers.create_fungible(**self._signers(kwargs))

    def create_fungible_asset(self, **kwargs: Any) -> Instruction:
        return helpers.create_fungible_asset(**self._signers(kwargs))

    def print_as_delegate(self, **kwargs: Any) -> Instruction:
        """`helpers.print_as_delegate` with the identity as delegate and payer."""
        out = dict(kwargs)
        if out.get("payer") is None:
            if self.config.identity is None:
                raise ValueError("No payer given and no identity configured")
            out["payer"] = self.config.identity
        out.setdefault("program_id", self.config.program_id)
        return helpers.print_as_delegate(**out)

    # Instructions

    def create_v1(self, args: CreateV1Args, **kwargs: Any) -> Instruction:
        return instructions.create_v1(args, **self._signers(kwargs))

    def update(self, args: UpdateArgs, **kwargs: Any) -> Instruction:
        return instructions.update(args, **self._signers(kwargs))

    def mint_v1(self, **kwargs: Any) -> Instruction:
        return instructions.mint_v1(**self._signers(kwargs))

    def burn_v1(self, **kwargs: Any) -> Instruction:
        """`instructions.burn_v1`; the authority receives the reclaimed rent."""
        return instructions.burn_v1(**self._signers(kwargs, with_payer=False))

    def transfer_v1(self, **kwargs: Any) -> Instruction:
        return instructions.transfer_v1(**self._signers(kwargs))

    def lock_v1(self, **kwargs: Any) -> Instruction:
        return instructions.lock_v1(**self._signers(kwargs))

    def unlock_v1(self, **kwargs: Any) -> Instruction:
        return instructions.unlock_v1(**self._signers(kwargs))

    def verify_creator_v1(self, **kwargs: Any) -> Instruction:
        return instructions.verify_creator_v1(**self._signers(kwargs, with_payer=False))

    def unverify_creator_v1(self, **kwargs: Any) -> Instruction:
        return instructions.unverify_creator_v1(
            **self._signers(kwargs, with_payer=False)
        )

    def verify_collection_v1(self, **kwargs: Any) -> Instruction:
        return instructions.verify_collection_v1(
            **self._signers(kwargs, with_payer=False)
        )

    def unverify_collection_v1(self, **kwargs: Any) -> Instruction:
        return instructions.unverify_collection_v1(
            **self._signers(kwargs, with_payer=False)
        )

    def delegate(self, kind: DelegateArgsKind, **kwargs: Any) -> Instruction:
        """
        Build a delegate instruction from keywords.

        Keywords naming a `DelegateAccounts` field go to the account set, with
        `authority` and `payer` defaulted. The remaining keywords go to
        `instructions.delegate`.
        """
        accounts, rest = self._delegate_accounts(kwargs)
        return instructions.delegate(kind, accounts, **rest)

    def revoke(self, kind: RevokeArgsKind, **kwargs: Any) -> Instruction:
        """Build a revoke instruction the way `delegate` does."""
        accounts, rest = self._delegate_accounts(kwargs)
        return instructions.revoke(kind, accounts, **rest)
