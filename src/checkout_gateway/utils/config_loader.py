"""
Configuration loader for the checkout gateway
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError
import logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "checkout_config.yml"

# Environment variable -> config field
ENV_OVERRIDES = {
    "VTEX_ACCOUNT": "account",
    "VTEX_ENVIRONMENT": "environment",
    "CHECKOUT_BASE_URL": "base_url",
    "CHECKOUT_TIMEOUT_SECONDS": "timeout_seconds",
    "CHECKOUT_USE_MOCK": "use_mock",
}


class CheckoutConfig(BaseModel):
    """Checkout backend configuration"""

    account: Optional[str] = None
    environment: str = "vtexcommercestable"
    base_url: Optional[str] = None
    timeout_seconds: float = Field(default=20.0, gt=0, le=300)
    user_agent: str = "checkout-gateway/0.1.0"
    headers: Dict[str, str] = Field(default_factory=dict)
    use_mock: bool = False

    @property
    def resolved_base_url(self) -> str:
        """Explicit base_url, else the account's commerce host."""
        if self.base_url:
            return self.base_url.rstrip("/")
        if not self.account:
            raise ValueError("Either base_url or account must be configured for the checkout backend.")
        return f"https://{self.account}.{self.environment}.com.br"

    @property
    def default_headers(self) -> Dict[str, str]:
        return {"User-Agent": self.user_agent, **self.headers}


def load_checkout_config(config_path: Optional[Path] = None) -> CheckoutConfig:
    """
    Load and validate checkout configuration from YAML file and environment

    Args:
        config_path: Path to config file. Defaults to config/checkout_config.yml;
            when the default file is absent, only environment variables are used

    Returns:
        Validated CheckoutConfig object

    Raises:
        FileNotFoundError: If an explicit config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    config_data: Dict[str, Any] = {}

    if config_path is None and not DEFAULT_CONFIG_PATH.exists():
        logger.info("No checkout config file found; using environment only")
    else:
        config_path = config_path or DEFAULT_CONFIG_PATH
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = (yaml.safe_load(f) or {}).get("checkout") or {}

    for env_name, field_name in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            config_data[field_name] = value

    try:
        config = CheckoutConfig(**config_data)
        logger.info(f"Loaded checkout config (mock={config.use_mock})")
        return config
    except ValidationError as e:
        logger.error(f"Checkout config validation failed: {e}")
        raise
