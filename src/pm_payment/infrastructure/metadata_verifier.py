"""Program-derived-address checks for token-metadata accounts (solders)."""

from collections.abc import Sequence

from solders.pubkey import Pubkey  # type: ignore

from src.pm_common.errors import InvalidMintMetadataError
from src.pm_payment.domain.constants import METADATA_PREFIX
from src.pm_payment.domain.models import MetadataAccount


def _parse_pubkey(value: str) -> Pubkey:
    try:
        return Pubkey.from_string(value)
    except ValueError as exc:
        raise InvalidMintMetadataError(f"not a valid account address: {value}") from exc


def _seed_bytes(seed: bytes | str) -> bytes:
    if isinstance(seed, bytes):
        return seed
    return bytes(_parse_pubkey(seed))


def find_metadata_address(mint: str, program_id: str) -> str:
    """Address of the metadata account for mint under the token-metadata program."""
    program = _parse_pubkey(program_id)
    address, _bump = Pubkey.find_program_address(
        [METADATA_PREFIX, bytes(program), bytes(_parse_pubkey(mint))],
        program,
    )
    return str(address)


class PdaMetadataVerifier:
    """MetadataVerifierProtocol backed by solders program-address derivation."""

    def verify_derivation(
        self, address: str, program_id: str, seeds: Sequence[bytes | str]
    ) -> None:
        program = _parse_pubkey(program_id)
        expected, _bump = Pubkey.find_program_address(
            [_seed_bytes(seed) for seed in seeds],
            program,
        )
        if str(expected) != address:
            raise InvalidMintMetadataError(
                f"metadata account {address} is not derived from its mint (expected {expected})"
            )

    def verify_owner(self, account: MetadataAccount, expected_program: str) -> bool:
        return account.owner == expected_program
