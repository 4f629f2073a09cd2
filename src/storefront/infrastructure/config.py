"""Runtime settings read from the environment (and an optional .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from storefront.infrastructure.ai.openai_assistant import DEFAULT_MODEL
from storefront.infrastructure.payments.simulated_provider import DEFAULT_DELAY_SECONDS

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

PAYMENT_PROVIDERS = ("simulated", "gateway")


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    admin_passcode: str = "admin"
    payment_provider: str = "simulated"
    payment_url: str | None = None
    payment_delay: float = DEFAULT_DELAY_SECONDS
    payment_decline: bool = False
    openai_api_key: str | None = None
    ai_model: str = DEFAULT_MODEL
    log_level: str = "WARNING"


def _flag(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    load_dotenv()

    provider = os.getenv("STOREFRONT_PAYMENT_PROVIDER", "simulated").strip().lower()
    if provider not in PAYMENT_PROVIDERS:
        raise ValueError(
            f"STOREFRONT_PAYMENT_PROVIDER must be one of {', '.join(PAYMENT_PROVIDERS)}, "
            f"got '{provider}'"
        )

    payment_url = os.getenv("STOREFRONT_PAYMENT_URL") or None
    if provider == "gateway" and not payment_url:
        raise ValueError("STOREFRONT_PAYMENT_URL is required for the gateway provider")

    data_dir = os.getenv("STOREFRONT_DATA_DIR")
    return Settings(
        data_dir=Path(data_dir) if data_dir else DEFAULT_DATA_DIR,
        admin_passcode=os.getenv("STOREFRONT_ADMIN_PASSCODE", "admin"),
        payment_provider=provider,
        payment_url=payment_url,
        payment_delay=float(os.getenv("STOREFRONT_PAYMENT_DELAY", str(DEFAULT_DELAY_SECONDS))),
        payment_decline=_flag(os.getenv("STOREFRONT_PAYMENT_DECLINE")),
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        ai_model=os.getenv("STOREFRONT_AI_MODEL", DEFAULT_MODEL),
        log_level=os.getenv("LOG_LEVEL", "WARNING"),
    )
