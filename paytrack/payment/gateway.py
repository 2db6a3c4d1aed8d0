from typing import Protocol, runtime_checkable


class GatewayError(Exception):
    """Raised by gateway implementations when a charge or cancellation is refused."""


@runtime_checkable
class PaymentGateway(Protocol):
    """
    Capability the payment module delegates money movement to.
    Card, wallet or crypto providers and test doubles all plug in here; the
    module never looks past these two calls.
    - charge: take `amount` minor units, return the provider's positive payment id
    - cancel: reverse a previous charge by id
    Both signal failure by raising.
    """

    def charge(self, amount: int) -> int:
        ...

    def cancel(self, payment_id: int) -> None:
        ...
