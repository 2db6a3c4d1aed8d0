import threading
from dataclasses import dataclass, replace
from typing import Dict, Optional

from loguru import logger

from paytrack.config import PaymentSettings
from paytrack.payment.errors import (
    AlreadyCancelled,
    AmountTooLarge,
    CannotCancel,
    GatewayContractError,
    InvalidAmount,
    InvalidArgument,
    PaymentFailed,
    PaymentNotFound,
)
from paytrack.payment.gateway import PaymentGateway


@dataclass(frozen=True)
class PaymentRecord:
    description: str
    amount: int  # minor units
    cancelled: bool = False


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class PaymentModule:
    """
    Tracks payments made through a single gateway.

    The module validates requests, hands the money movement to the gateway and
    keeps one record per gateway-issued id. Records are never removed; a record
    moves from active to cancelled once and stays there. Every failure leaves
    the stored records exactly as they were.
    """

    def __init__(self, gateway: PaymentGateway, settings: Optional[PaymentSettings] = None):
        if gateway is None:
            raise InvalidArgument("payment gateway cannot be None")
        self.gateway = gateway
        self.settings = settings or PaymentSettings()
        self._payments: Dict[int, PaymentRecord] = {}
        self._lock = threading.Lock()

    def pay(self, description: str, amount: int) -> int:
        if not _is_int(amount) or amount <= 0:
            raise InvalidAmount(amount)
        if amount > self.settings.max_amount:
            raise AmountTooLarge(amount, self.settings.max_amount)
        if not isinstance(description, str) or description == "":
            raise InvalidArgument("description cannot be empty")

        with self._lock:
            try:
                payment_id = self.gateway.charge(amount)
            except Exception as exc:
                logger.bind(event="payment_pay_failed", amount=amount).info("Gateway charge failed: {}", exc)
                raise PaymentFailed(exc) from exc

            if not _is_int(payment_id) or payment_id <= 0 or payment_id in self._payments:
                logger.bind(event="payment_pay_failed", payment_id=payment_id).error("Gateway returned unusable payment id")
                raise GatewayContractError(payment_id)

            self._payments[payment_id] = PaymentRecord(description=description, amount=amount)
            logger.bind(event="payment_pay", payment_id=payment_id, amount=amount).info("Payment recorded")
            return payment_id

    def cancel(self, payment_id: int) -> None:
        with self._lock:
            record = self._payments.get(payment_id) if _is_int(payment_id) else None
            if record is None:
                raise PaymentNotFound(payment_id)
            if record.cancelled:
                raise AlreadyCancelled(payment_id)

            try:
                self.gateway.cancel(payment_id)
            except Exception as exc:
                logger.bind(event="payment_cancel_failed", payment_id=payment_id).info("Gateway cancel failed: {}", exc)
                raise CannotCancel(payment_id, exc) from exc

            self._payments[payment_id] = replace(record, cancelled=True)
            logger.bind(event="payment_cancel", payment_id=payment_id).info("Payment cancelled")

    def info(self, payment_id: int) -> PaymentRecord:
        with self._lock:
            record = self._payments.get(payment_id) if _is_int(payment_id) else None
            if record is None:
                raise PaymentNotFound(payment_id)
            return replace(record)

    def info_all(self) -> Dict[int, PaymentRecord]:
        with self._lock:
            return {payment_id: replace(record) for payment_id, record in self._payments.items()}

    def __len__(self) -> int:
        with self._lock:
            return len(self._payments)

    def __contains__(self, payment_id) -> bool:
        with self._lock:
            return _is_int(payment_id) and payment_id in self._payments
