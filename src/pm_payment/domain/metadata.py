"""Royalty metadata verification before its contents are trusted."""

from src.pm_common.errors import InvalidMintMetadataError, InvalidMintMetadataOwnerError
from src.pm_payment.domain.constants import METADATA_PREFIX
from src.pm_payment.domain.models import MetadataAccount, RoyaltyMetadata
from src.pm_payment.domain.protocols import MetadataVerifierProtocol


def resolve_royalty_metadata(
    account: MetadataAccount,
    mint: str,
    verifier: MetadataVerifierProtocol,
    metadata_program: str,
) -> RoyaltyMetadata | None:
    """Return the account's royalty metadata, or None if the account is empty.

    1. address must derive from ("metadata", metadata_program, mint) — always checked
    2. a non-empty account must be owned by metadata_program
    3. its metadata must describe the same mint as the payment
    """
    verifier.verify_derivation(
        account.address, metadata_program, (METADATA_PREFIX, metadata_program, mint)
    )

    if account.data is None:
        return None
    if not verifier.verify_owner(account, metadata_program):
        raise InvalidMintMetadataOwnerError(account.owner)
    if account.data.mint != mint:
        raise InvalidMintMetadataError(
            f"metadata describes mint {account.data.mint}, payment is for {mint}"
        )
    return account.data
