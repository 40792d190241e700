from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from .constants import (
    MAX_CREATOR_LIMIT,
    MAX_CREATOR_SHARE,
    MAX_NAME_LENGTH,
    MAX_SELLER_FEE_BASIS_POINTS,
    MAX_SYMBOL_LENGTH,
    MAX_URI_LENGTH,
)
from .errors import MetadataLimitError

if TYPE_CHECKING:  # pragma: no cover
    from .models import Creator


def _check_length(field: str, value: str, limit: int) -> None:
    size = len(value.encode("utf-8"))
    if size > limit:
        raise MetadataLimitError(f"{field} is {size} bytes, limit is {limit}: {value!r}")


def validate_creators(creators: Sequence[Creator]) -> None:
    """
    Validate a creator list the way the program does on create and update.

    The list must be non-empty, hold at most `MAX_CREATOR_LIMIT` distinct
    addresses, and its shares must add up to exactly 100.
    """
    if not creators:
        raise MetadataLimitError("Creators must contain at least one creator")
    if len(creators) > MAX_CREATOR_LIMIT:
        raise MetadataLimitError(
            f"{len(creators)} creators given, limit is {MAX_CREATOR_LIMIT}"
        )
    seen = set()
    for creator in creators:
        if creator.address in seen:
            raise MetadataLimitError(f"Duplicate creator address: {creator.address}")
        seen.add(creator.address)
    total = sum(creator.share for creator in creators)
    if total != MAX_CREATOR_SHARE:
        raise MetadataLimitError(
            f"Creator shares must add up to {MAX_CREATOR_SHARE}, got {total}"
        )


def validate_data_fields(
    *,
    name: str,
    symbol: str,
    uri: str,
    seller_fee_basis_points: int,
    creators: Sequence[Creator] | None,
) -> None:
    """
    Check metadata data fields against the program limits.

    Raises:
        MetadataLimitError: if a string is too long, the fee exceeds 100 %, or
            the creator list is invalid.
    """
    _check_length("Name", name, MAX_NAME_LENGTH)
    _check_length("Symbol", symbol, MAX_SYMBOL_LENGTH)
    _check_length("URI", uri, MAX_URI_LENGTH)
    if seller_fee_basis_points > MAX_SELLER_FEE_BASIS_POINTS:
        raise MetadataLimitError(
            f"Seller fee {seller_fee_basis_points} exceeds "
            f"{MAX_SELLER_FEE_BASIS_POINTS} basis points"
        )
    if creators is not None:
        validate_creators(creators)
