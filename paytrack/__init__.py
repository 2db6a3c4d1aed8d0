from loguru import logger

from paytrack.payment.errors import (
    AlreadyCancelled,
    AmountTooLarge,
    CannotCancel,
    GatewayContractError,
    InvalidAmount,
    InvalidArgument,
    PaymentError,
    PaymentFailed,
    PaymentNotFound,
)
from paytrack.payment.gateway import GatewayError, PaymentGateway
from paytrack.payment.module import PaymentModule, PaymentRecord

# Silent unless the application calls configure_logging() or logger.enable("paytrack")
logger.disable("paytrack")

__all__ = [
    "AlreadyCancelled",
    "AmountTooLarge",
    "CannotCancel",
    "GatewayContractError",
    "GatewayError",
    "InvalidAmount",
    "InvalidArgument",
    "PaymentError",
    "PaymentFailed",
    "PaymentGateway",
    "PaymentModule",
    "PaymentNotFound",
    "PaymentRecord",
]
