import sys

import pytest
from loguru import logger

from paytrack.audit.logger import configure_logging
from paytrack.payment.errors import CannotCancel, PaymentFailed
from paytrack.payment.gateway_mock import MockGateway
from paytrack.payment.module import PaymentModule


@pytest.fixture(name="events")
def events_fixture():
    configure_logging("DEBUG")
    events = []
    sink_id = logger.add(lambda message: events.append((message.record["extra"].get("event"), message.record["level"].name)), level="DEBUG")
    yield events
    logger.remove(sink_id)
    logger.remove()
    logger.add(sys.stderr)
    logger.disable("paytrack")


def test_module_is_silent_by_default():
    events = []
    sink_id = logger.add(lambda message: events.append(message), level="DEBUG")
    try:
        module = PaymentModule(MockGateway())
        module.cancel(module.pay("Coffee", 5))
    finally:
        logger.remove(sink_id)
    assert events == []


def test_configured_logging_emits_payment_events(events):
    gateway = MockGateway()
    module = PaymentModule(gateway)
    payment_id = module.pay("Coffee", 5)
    gateway.fail_cancel = True
    with pytest.raises(CannotCancel):
        module.cancel(payment_id)

    assert ("payment_pay", "INFO") in events
    assert ("payment_cancel_failed", "INFO") in events
    assert ("gateway_cancel_declined", "INFO") in events


def test_declined_charge_is_not_a_warning(events):
    module = PaymentModule(MockGateway(fail_charge=True))
    with pytest.raises(PaymentFailed):
        module.pay("Coffee", 5)

    assert ("payment_pay_failed", "INFO") in events
    assert all(level not in ("WARNING", "ERROR") for _, level in events)
