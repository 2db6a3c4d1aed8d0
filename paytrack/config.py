import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_MAX_AMOUNT = 100000

_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
_env_path = os.path.join(_project_root, ".env")


class PaymentSettings(BaseModel):
    """
    Runtime settings for the payment module.
    - max_amount: largest accepted payment in minor units (e.g., cents)
    - log_level: level used by configure_logging()
    """
    max_amount: int = Field(default=DEFAULT_MAX_AMOUNT, gt=0)
    log_level: str = "INFO"


def load_settings(env_path: Optional[str] = None) -> PaymentSettings:
    """
    Build settings from the environment, reading the project .env first.
    Variables already set in the process win over the .env file.
    """
    load_dotenv(dotenv_path=env_path or _env_path, override=False)

    raw_max = os.environ.get("PAYTRACK_MAX_AMOUNT")
    try:
        max_amount = int(raw_max) if raw_max else DEFAULT_MAX_AMOUNT
    except ValueError:
        raise ValueError(f"PAYTRACK_MAX_AMOUNT must be an integer, got {raw_max!r}")

    return PaymentSettings(
        max_amount=max_amount,
        log_level=os.environ.get("PAYTRACK_LOG_LEVEL", "INFO").upper(),
    )
