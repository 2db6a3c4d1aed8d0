from typing import List, Set

from loguru import logger

from paytrack.payment.gateway import GatewayError


class MockGateway:
    """
    In-memory gateway for development and tests.
    Issues sequential ids and can be switched to refuse charges or cancellations.
    """

    def __init__(self, start_id: int = 1, fail_charge: bool = False, fail_cancel: bool = False):
        self._next_id = start_id
        self.fail_charge = fail_charge
        self.fail_cancel = fail_cancel
        self.charges: List[int] = []
        self.cancellations: List[int] = []
        self._issued: Set[int] = set()

    def charge(self, amount: int) -> int:
        if self.fail_charge:
            logger.bind(event="gateway_charge_declined").info("Mock gateway declined charge")
            raise GatewayError("charge declined (simulated)")
        payment_id = self._next_id
        self._next_id += 1
        self._issued.add(payment_id)
        self.charges.append(amount)
        logger.bind(event="gateway_charge", payment_id=payment_id).debug("Mock gateway charged")
        return payment_id

    def cancel(self, payment_id: int) -> None:
        if payment_id not in self._issued:
            raise GatewayError(f"unknown payment {payment_id}")
        if self.fail_cancel:
            logger.bind(event="gateway_cancel_declined", payment_id=payment_id).info("Mock gateway declined cancellation")
            raise GatewayError("cancellation declined (simulated)")
        self.cancellations.append(payment_id)
        logger.bind(event="gateway_cancel", payment_id=payment_id).debug("Mock gateway cancelled")
