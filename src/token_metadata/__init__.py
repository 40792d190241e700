# ruff: noqa: RUF022
"""
Token Metadata Python SDK.

Public entrypoints:
- :mod:`token_metadata.pda` for program-derived addresses
- :mod:`token_metadata.models` for account and argument codecs
- :mod:`token_metadata.instructions` for instruction builders
- :class:`token_metadata.client.TokenMetadataClient` for reads and high-level
  builders over a Solana JSON-RPC client

Every builder returns a `solders.instruction.Instruction`; signing and sending
are left to the caller.
"""

from __future__ import annotations

from . import constants, enums, instructions, seeds
from .client import ClientConfig, TokenMetadataClient
from .clusters import DEFAULT_CLUSTERS, Cluster
from .codec import ByteReader, ByteWriter
from .digital_asset import (
    DigitalAsset,
    DigitalAssetWithToken,
    deserialize_digital_asset,
    fetch_all_digital_asset_with_token_by_owner,
    fetch_digital_asset,
    fetch_digital_asset_with_associated_token,
    fetch_digital_asset_with_token,
    fetch_master_edition,
    fetch_metadata,
    is_fungible,
    is_non_fungible,
    is_programmable,
)
from .enums import (
    HolderDelegateRole,
    Key,
    MetadataDelegateRole,
    PayloadKey,
    TokenDelegateRole,
    TokenStandard,
)
from .errors import (
    AccountKeyMismatchError,
    AccountNotFoundError,
    AddressDerivationError,
    BufferUnderrunError,
    EncodingFormatError,
    EncodingRangeError,
    InvalidEditionAccountError,
    InvalidRoleArgumentError,
    JsonMetadataError,
    MetadataLimitError,
    MissingRpcClientError,
    TokenMetadataError,
    UnknownVariantError,
)
from .helpers import (
    create,
    create_and_mint,
    create_args,
    create_fungible,
    create_fungible_asset,
    create_nft,
    create_programmable_nft,
    print_as_delegate,
)
from .json_metadata import fetch_json_metadata
from .models import (
    AuthorizationData,
    Collection,
    CollectionDetails,
    Creator,
    Data,
    Edition,
    EditionMarker,
    EditionMarkerV2,
    HolderDelegateRecord,
    MasterEdition,
    Metadata,
    MetadataDelegateRecord,
    Mint,
    Payload,
    PayloadType,
    PrintSupply,
    ProgrammableConfig,
    TokenAccount,
    TokenRecord,
    Toggle,
    Uses,
)
from .pda import (
    Pda,
    find_associated_token_pda,
    find_collection_authority_record_pda,
    find_edition_marker_from_edition_number_pda,
    find_edition_marker_pda,
    find_edition_marker_v2_pda,
    find_escrow_pda,
    find_holder_delegate_record_pda,
    find_master_edition_pda,
    find_metadata_delegate_record_pda,
    find_metadata_pda,
    find_program_address,
    find_token_record_pda,
    find_use_authority_record_pda,
)
from .rpc import RpcAccountReader
from .validation import validate_creators, validate_data_fields

__all__ = [
    # Clusters
    "Cluster",
    "DEFAULT_CLUSTERS",
    # Facade
    "ClientConfig",
    "TokenMetadataClient",
    # Readers
    "RpcAccountReader",
    "DigitalAsset",
    "DigitalAssetWithToken",
    "deserialize_digital_asset",
    "fetch_digital_asset",
    "fetch_digital_asset_with_token",
    "fetch_digital_asset_with_associated_token",
    "fetch_all_digital_asset_with_token_by_owner",
    "fetch_metadata",
    "fetch_master_edition",
    "fetch_json_metadata",
    "is_fungible",
    "is_non_fungible",
    "is_programmable",
    # Helpers
    "create",
    "create_args",
    "create_and_mint",
    "create_nft",
    "create_programmable_nft",
    "create_fungible",
    "create_fungible_asset",
    "print_as_delegate",
    # Codec
    "ByteReader",
    "ByteWriter",
    # Validation
    "validate_creators",
    "validate_data_fields",
    # Errors
    "TokenMetadataError",
    "AccountKeyMismatchError",
    "AccountNotFoundError",
    "AddressDerivationError",
    "BufferUnderrunError",
    "EncodingFormatError",
    "EncodingRangeError",
    "InvalidEditionAccountError",
    "InvalidRoleArgumentError",
    "JsonMetadataError",
    "MetadataLimitError",
    "MissingRpcClientError",
    "UnknownVariantError",
    # Enums
    "HolderDelegateRole",
    "Key",
    "MetadataDelegateRole",
    "PayloadKey",
    "TokenDelegateRole",
    "TokenStandard",
    # Models
    "AuthorizationData",
    "Collection",
    "CollectionDetails",
    "Creator",
    "Data",
    "Edition",
    "EditionMarker",
    "EditionMarkerV2",
    "HolderDelegateRecord",
    "MasterEdition",
    "Metadata",
    "MetadataDelegateRecord",
    "Mint",
    "Payload",
    "PayloadType",
    "PrintSupply",
    "ProgrammableConfig",
    "TokenAccount",
    "TokenRecord",
    "Toggle",
    "Uses",
    # PDAs
    "Pda",
    "find_program_address",
    "find_metadata_pda",
    "find_master_edition_pda",
    "find_edition_marker_pda",
    "find_edition_marker_from_edition_number_pda",
    "find_edition_marker_v2_pda",
    "find_token_record_pda",
    "find_metadata_delegate_record_pda",
    "find_holder_delegate_record_pda",
    "find_collection_authority_record_pda",
    "find_use_authority_record_pda",
    "find_escrow_pda",
    "find_associated_token_pda",
    # Modules
    "constants",
    "enums",
    "instructions",
    "seeds",
]
