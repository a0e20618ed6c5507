"""Collaborator Protocols — dependency inversion for testability.

Unit tests inject fakes that conform to these Protocols.
Infrastructure layer provides the real implementations.
"""

from collections.abc import Sequence
from typing import Protocol

from src.pm_payment.domain.models import MetadataAccount


class TransferPort(Protocol):
    """Atomic "move amount lamports from source to destination".

    Raises an AppError subclass when the transfer is rejected.
    """

    def transfer(self, source: str, destination: str, amount: int) -> None: ...


class MetadataVerifierProtocol(Protocol):
    def verify_derivation(
        self, address: str, program_id: str, seeds: Sequence[bytes | str]
    ) -> None:
        """Raise InvalidMintMetadataError unless address derives from seeds under program_id.

        bytes seeds are used verbatim; str seeds are base58 account addresses.
        """
        ...

    def verify_owner(self, account: MetadataAccount, expected_program: str) -> bool: ...
