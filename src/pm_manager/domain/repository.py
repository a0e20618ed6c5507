"""Repository Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from typing import Protocol

from sqlalchemy.orm import Session

from src.pm_manager.domain.models import PaymentManager


class PaymentManagerRepositoryProtocol(Protocol):
    def get(self, db: Session, name: str) -> PaymentManager | None: ...

    def insert(self, db: Session, manager: PaymentManager) -> PaymentManager: ...

    def update(self, db: Session, manager: PaymentManager) -> PaymentManager: ...

    def delete(self, db: Session, name: str) -> None: ...
