"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings so that:
  - environment variables win (a Kubernetes ConfigMap or a CI job),
  - a .env file at the project root is the fallback,
  - invalid values are rejected at startup, not halfway through a run.

Environment variables map to fields by name (TOPOLOGY_PATH → topology_path).
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nifi_pki.domain.templates import CLUSTER_DOMAIN

# Resolve the .env file relative to the project root (two levels above this file),
# so settings load correctly regardless of the working directory at runtime.
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"

_DNS_SUBDOMAIN = re.compile(r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?(\.[a-z0-9]([-a-z0-9]*[a-z0-9])?)*$")


class AppSettings(BaseSettings):
    """
    Settings of the manifest renderer.

    Load order (highest priority first):
      1. Environment variables
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    topology_path: Path = Field(description="JSON file describing the NiFi cluster topology")
    output_path: Path | None = Field(
        default=None,
        description="Where to write the NifiUser manifests (stdout when unset)",
    )
    cluster_domain: str = Field(
        default=CLUSTER_DOMAIN,
        description="Kubernetes cluster DNS domain used in service FQDNs",
    )
    log_level: str = Field(default="INFO")

    @field_validator("cluster_domain")
    @classmethod
    def validate_cluster_domain(cls, value: str) -> str:
        """Reject domains that are not DNS-1123 subdomains."""
        domain = value.strip().strip(".")
        if not domain or len(domain) > 253 or not _DNS_SUBDOMAIN.match(domain):
            raise ValueError(f"cluster_domain must be a DNS-1123 subdomain, got {value!r}")
        return domain

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level
