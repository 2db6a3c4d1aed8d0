from typing import Optional


class PaymentError(Exception):
    """Base class for every failure raised by the payment module."""


class InvalidArgument(PaymentError, ValueError):
    pass


class InvalidAmount(PaymentError, ValueError):
    def __init__(self, amount=None):
        self.amount = amount
        super().__init__("invalid amount: must be positive")


class AmountTooLarge(PaymentError, ValueError):
    def __init__(self, amount: int, limit: int):
        self.amount = amount
        self.limit = limit
        super().__init__(f"amount exceeds maximum limit of {limit}")


class PaymentNotFound(PaymentError, LookupError):
    def __init__(self, payment_id):
        self.payment_id = payment_id
        super().__init__(f"payment not found: ID {payment_id}")


class AlreadyCancelled(PaymentError):
    def __init__(self, payment_id: int):
        self.payment_id = payment_id
        super().__init__(f"payment already cancelled: ID {payment_id}")


class PaymentFailed(PaymentError):
    """The gateway refused or failed to charge. The gateway's exception is kept in ``cause``."""

    def __init__(self, cause: Optional[BaseException] = None):
        self.cause = cause
        msg = "payment processing failed"
        super().__init__(f"{msg}: {cause}" if cause is not None else msg)


class CannotCancel(PaymentError):
    """The gateway failed to cancel. The payment record is left untouched."""

    def __init__(self, payment_id: int, cause: Optional[BaseException] = None):
        self.payment_id = payment_id
        self.cause = cause
        msg = "cannot cancel payment"
        super().__init__(f"{msg}: {cause}" if cause is not None else msg)


class GatewayContractError(PaymentError):
    """
    The gateway reported success but handed back an identifier that cannot be
    tracked: not a positive integer, or one already in use.
    Raised instead of recording anything; the charge itself is not reverted.
    """

    def __init__(self, payment_id):
        self.payment_id = payment_id
        super().__init__(f"invalid payment ID returned: {payment_id!r}")
