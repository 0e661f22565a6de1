"""Configuration management for circulation.

Loads configuration from environment variables and provides defaults.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from .lending.fees import DEFAULT_DAILY_RATE
from .notifications.notifiers import NOTIFIER_CHANNELS

# Load .env file if present
load_dotenv()


@dataclass
class Config:
    """Application configuration."""

    # Fees
    daily_fee: float = DEFAULT_DAILY_RATE
    currency: str = "R$"

    # Lending
    loan_days: int = 7

    # Notifications, in delivery order
    notifiers: list[str] = field(default_factory=lambda: ["email", "sms"])

    # Logging
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        channels = os.environ.get("CIRCULATION_NOTIFIERS", "email,sms")

        return cls(
            daily_fee=float(os.environ.get("CIRCULATION_DAILY_FEE", str(DEFAULT_DAILY_RATE))),
            currency=os.environ.get("CIRCULATION_CURRENCY", "R$"),
            loan_days=int(os.environ.get("CIRCULATION_LOAN_DAYS", "7")),
            notifiers=[c.strip().lower() for c in channels.split(",") if c.strip()],
            log_level=os.environ.get("CIRCULATION_LOG_LEVEL", "WARNING").upper(),
        )

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []

        if self.daily_fee < 0:
            errors.append(f"Daily fee cannot be negative: {self.daily_fee}")

        for name in self.notifiers:
            if name not in NOTIFIER_CHANNELS:
                valid = ", ".join(NOTIFIER_CHANNELS)
                errors.append(f"Unknown notifier channel: {name} (valid: {valid})")

        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"Unknown log level: {self.log_level}")

        return errors


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Reset the global config instance. Used for testing."""
    global _config
    _config = None
