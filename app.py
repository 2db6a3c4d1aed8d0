from dataclasses import asdict
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from paytrack.audit.logger import configure_logging
from paytrack.config import load_settings
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
from paytrack.payment.gateway_mock import MockGateway
from paytrack.payment.module import PaymentModule

app = FastAPI(
    title="Paytrack API",
    description="Tracks payments made through a pluggable payment gateway.",
    version="0.1.0",
)

_payment_module: Optional[PaymentModule] = None

ERROR_STATUS = {
    InvalidArgument: 400,
    InvalidAmount: 400,
    AmountTooLarge: 400,
    PaymentNotFound: 404,
    AlreadyCancelled: 409,
    PaymentFailed: 502,
    CannotCancel: 502,
    GatewayContractError: 502,
}


@app.on_event("startup")
def _startup():
    settings = load_settings()
    configure_logging(settings.log_level)

    # Demo driver: one module over the mock gateway for the process lifetime
    global _payment_module
    _payment_module = PaymentModule(MockGateway(), settings)


def get_payment_module() -> PaymentModule:
    if _payment_module is None:
        raise RuntimeError("payment module is not initialised; the app has not started")
    return _payment_module


@app.exception_handler(PaymentError)
async def payment_error_handler(request: Request, exc: PaymentError):
    return JSONResponse({"error": str(exc)}, status_code=ERROR_STATUS.get(type(exc), 400))


class PayRequest(BaseModel):
    description: str
    amount: int


def _record_json(payment_id: int, module: PaymentModule) -> dict:
    return {"payment_id": payment_id, **asdict(module.info(payment_id))}


@app.post("/api/payments", tags=["Payments"])
def create_payment(payload: PayRequest, module: PaymentModule = Depends(get_payment_module)):
    """
    Charges the gateway and starts tracking the payment.

    - **description**: What the payment is for (must not be empty).
    - **amount**: Amount in minor units (e.g., cents), between 1 and the configured maximum.
    """
    payment_id = module.pay(payload.description, payload.amount)
    return {"payment_id": payment_id}


@app.post("/api/payments/{payment_id}/cancel", tags=["Payments"])
def cancel_payment(payment_id: int, module: PaymentModule = Depends(get_payment_module)):
    module.cancel(payment_id)
    return {"status": "cancelled", "payment_id": payment_id}


@app.get("/api/payments/{payment_id}", tags=["Payments"])
def get_payment(payment_id: int, module: PaymentModule = Depends(get_payment_module)):
    return _record_json(payment_id, module)


@app.get("/api/payments", tags=["Payments"])
def list_payments(module: PaymentModule = Depends(get_payment_module)):
    return [
        {"payment_id": payment_id, **asdict(record)}
        for payment_id, record in sorted(module.info_all().items())
    ]


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
