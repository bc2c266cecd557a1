"""Webhook configuration loaded from the environment."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from . import crd
from .storage import get_all_protocols

DEFAULT_ADDR = "0.0.0.0"
DEFAULT_PORT = 9443
DEFAULT_LOOKUP_TIMEOUT = 5.0
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class WebhookConfig:
    """Settings fixed at operator startup and shared read-only by all requests."""

    storage_protocols: Tuple[str, ...] = tuple(get_all_protocols())
    addr: str = DEFAULT_ADDR
    port: int = DEFAULT_PORT
    host: Optional[str] = None
    certfile: Optional[str] = None
    pkeyfile: Optional[str] = None
    managed_name: Optional[str] = crd.WEBHOOK_NAME
    lookup_timeout: float = DEFAULT_LOOKUP_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def storage_protocols_display(self):
        return crd.COMMA_SPACE_SEPARATOR.join(self.storage_protocols)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "WebhookConfig":
        """Build the configuration from environment variables.

        Unset variables fall back to the defaults. ``WEBHOOK_MANAGED_NAME``
        set to an empty string disables the managed webhook configuration.
        Without a certificate and key, kopf generates a self-signed pair.
        """
        env = os.environ if environ is None else environ

        protocols = env.get("TRAINEDMODEL_STORAGE_PROTOCOLS")
        if protocols:
            storage_protocols = tuple(p.strip() for p in protocols.split(",") if p.strip())
        else:
            storage_protocols = tuple(get_all_protocols())

        port = int(env.get("WEBHOOK_PORT", DEFAULT_PORT))
        if not 0 < port < 65536:
            raise ValueError(f"Invalid WEBHOOK_PORT: {port}")

        certfile = env.get("WEBHOOK_CERT_FILE") or None
        pkeyfile = env.get("WEBHOOK_KEY_FILE") or None
        if bool(certfile) != bool(pkeyfile):
            raise ValueError("WEBHOOK_CERT_FILE and WEBHOOK_KEY_FILE must be set together")

        lookup_timeout = float(env.get("LOOKUP_TIMEOUT_SECONDS", DEFAULT_LOOKUP_TIMEOUT))
        if lookup_timeout <= 0:
            raise ValueError(f"Invalid LOOKUP_TIMEOUT_SECONDS: {lookup_timeout}")

        return cls(
            storage_protocols=storage_protocols,
            addr=env.get("WEBHOOK_ADDR", DEFAULT_ADDR),
            port=port,
            host=env.get("WEBHOOK_HOST") or None,
            certfile=certfile,
            pkeyfile=pkeyfile,
            managed_name=env.get("WEBHOOK_MANAGED_NAME", crd.WEBHOOK_NAME) or None,
            lookup_timeout=lookup_timeout,
            log_level=env.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
