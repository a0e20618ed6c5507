"""PayoutExecutor — issues the transfers of a finalized PayoutPlan.

Transfers run in plan order and stop at the first failure. Whatever the port
raises is reported as TransferFailedError. Funds moved by earlier transfers
are not compensated here; the caller's transaction boundary decides whether
they commit.
"""

import logging

from src.pm_common.errors import AppError, TransferFailedError
from src.pm_payment.domain.models import PayoutPlan, Transfer
from src.pm_payment.domain.protocols import TransferPort

logger = logging.getLogger(__name__)


class PayoutExecutor:
    def __init__(self, transfer_port: TransferPort) -> None:
        self._port = transfer_port

    def execute(self, plan: PayoutPlan) -> list[Transfer]:
        """Run every transfer of plan; returns them in the order executed."""
        transfers = plan.transfers()
        executed: list[Transfer] = []
        for transfer in transfers:
            try:
                self._port.transfer(transfer.source, transfer.destination, transfer.amount)
            except Exception as exc:
                reason = exc.message if isinstance(exc, AppError) else f"{type(exc).__name__}: {exc}"
                logger.warning(
                    "Transfer failed after %d of %d: %s %d → %s (%s)",
                    len(executed),
                    len(transfers),
                    transfer.kind.value,
                    transfer.amount,
                    transfer.destination,
                    reason,
                )
                raise TransferFailedError(transfer.destination, transfer.amount, reason) from exc
            logger.debug(
                "Transfer %s: %d %s → %s",
                transfer.kind.value,
                transfer.amount,
                transfer.source,
                transfer.destination,
            )
            executed.append(transfer)
        return executed
