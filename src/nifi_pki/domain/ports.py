"""
Ports — Protocol-based interfaces for the adapters the core depends on.

The core never parses certificates or touches files itself:

  SubjectParser   → certificate bytes → ordered subject attributes
  TopologySource  → a ClusterSnapshot (topology + extra hostnames)
  ManifestSink    → somewhere to put the rendered NifiUser manifests

Adapters satisfy a port by implementing its method; no inheritance needed.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from railway.result import Result

from nifi_pki.domain.models import ClusterSnapshot, SubjectAttribute


@runtime_checkable
class SubjectParser(Protocol):
    """
    Port: read the subject of a certificate.

    Returns the subject attributes in certificate order. An unreadable
    certificate is a Result.failure(VALIDATION_ERROR) whose exception is a
    MalformedSubjectError. Empty optional fields are simply absent.
    """

    def parse(self, certificate: bytes) -> Result[tuple[SubjectAttribute, ...]]: ...


@runtime_checkable
class TopologySource(Protocol):
    """Port: provide the cluster snapshot to synthesize from."""

    def load(self) -> Result[ClusterSnapshot]: ...


@runtime_checkable
class ManifestSink(Protocol):
    """
    Port: emit a rendered manifest list.

    Returns Result[int] with the number of manifests written.
    """

    def write(self, manifests: Mapping[str, Any]) -> Result[int]: ...
