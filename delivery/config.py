"""Client configuration: project id, service URL and request timeout."""

import math
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigError

DEFAULT_BASE_URL = 'https://deliver.kenticocloud.com'
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class DeliveryOptions:
    project_id: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        if not self.project_id or not isinstance(self.project_id, str):
            raise ConfigError("project_id is required")
        if not self.base_url:
            raise ConfigError("base_url is required")
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}")

    def endpoint(self, path: str) -> str:
        """Absolute URL of a resource path, e.g. 'items/home'."""
        return f"{self.base_url.rstrip('/')}/{self.project_id}/{path.lstrip('/')}"

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> 'DeliveryOptions':
        """
        Build options from DELIVERY_PROJECT_ID, DELIVERY_BASE_URL and
        DELIVERY_TIMEOUT, loading `env_file` (or a .env in the working
        directory) first. Variables already set in the environment win.
        """
        load_dotenv(env_file)

        project_id = os.getenv('DELIVERY_PROJECT_ID')
        if not project_id:
            raise ConfigError("DELIVERY_PROJECT_ID is not set")

        raw_timeout = os.getenv('DELIVERY_TIMEOUT', str(DEFAULT_TIMEOUT))
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigError(f"DELIVERY_TIMEOUT must be a number, got {raw_timeout!r}") from None

        return cls(
            project_id=project_id,
            base_url=os.getenv('DELIVERY_BASE_URL', DEFAULT_BASE_URL),
            timeout=timeout,
        )
