"""
Topology file adapter — a JSON document on disk → ClusterSnapshot.

Adapter layer — implements the TopologySource port. The document is
validated with pydantic before it becomes a domain object:

  {
    "name": "test-cluster",
    "namespace": "test-namespace",
    "uid": "9b2c...",                      (optional)
    "headlessServiceEnabled": true,        (optional, default false)
    "nodes": [{"id": 0}, {"id": 1}],
    "additionalHostnames": {"0": ["nifi-0.example.com"]}   (optional)
  }

The node list mirrors the NifiCluster spec (`spec.nodes[].id`).
"""

from __future__ import annotations

import re
from pathlib import Path

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel
from railway import ErrorCode
from railway.result import Result

from nifi_pki.domain.models import ClusterSnapshot, ClusterTopology

log = structlog.get_logger()

_DNS_1123_LABEL = re.compile(r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?$")


class NodeDocument(BaseModel):
    id: int = Field(ge=0, description="Node id, unique within the cluster")


class TopologyDocument(BaseModel):
    """Validated shape of a topology file."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    name: str
    namespace: str
    uid: str = ""
    headless_service_enabled: bool = False
    nodes: list[NodeDocument] = Field(default_factory=list)
    additional_hostnames: dict[int, list[str]] = Field(default_factory=dict)

    @field_validator("name", "namespace")
    @classmethod
    def validate_dns_label(cls, value: str) -> str:
        """Reject names that cannot be used as a DNS-1123 label."""
        if len(value) > 63 or not _DNS_1123_LABEL.match(value):
            raise ValueError(f"must be a DNS-1123 label (lowercase alphanumerics and '-'), got {value!r}")
        return value

    @model_validator(mode="after")
    def validate_nodes(self) -> TopologyDocument:
        ids = [node.id for node in self.nodes]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"duplicate node ids: {duplicates}")
        unknown = sorted(set(self.additional_hostnames) - set(ids))
        if unknown:
            raise ValueError(f"additional hostnames given for unknown node ids: {unknown}")
        return self

    def to_snapshot(self) -> ClusterSnapshot:
        topology = ClusterTopology.of(
            name=self.name,
            namespace=self.namespace,
            node_ids=(node.id for node in self.nodes),
            headless_service_enabled=self.headless_service_enabled,
            uid=self.uid,
        )
        return ClusterSnapshot(
            topology=topology,
            additional_hostnames={
                node_id: tuple(names) for node_id, names in sorted(self.additional_hostnames.items())
            },
        )


def parse_topology_document(raw: str | bytes) -> Result[TopologyDocument]:
    """Validate raw JSON; a schema violation is a VALIDATION_ERROR."""
    return Result.from_computation(
        lambda: TopologyDocument.model_validate_json(raw),
        ErrorCode.VALIDATION_ERROR,
        "Invalid topology document",
    )


def _read(path: Path) -> Result[bytes]:
    if not path.is_file():
        return Result.failure(ErrorCode.NOT_FOUND, f"Topology file not found: {path}")
    return Result.from_computation(
        path.read_bytes,
        ErrorCode.TECHNICAL_ERROR,
        f"Failed to read topology file {path}",
    )


def _describe(error: BaseException) -> str:
    if isinstance(error, ValidationError):
        return "; ".join(
            f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}" for item in error.errors()
        )
    return str(error)


class TopologyFile:
    """
    Load a cluster topology from a JSON file.

    Implements the TopologySource port.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    def document(self) -> Result[TopologyDocument]:
        return (
            _read(self._path)
            .flat_map(parse_topology_document)
            .peek_failure(
                lambda err: log.error(
                    "topology.invalid",
                    path=str(self._path),
                    code=err.code.value,
                    reason=_describe(err.exception) if err.exception else err.message,
                )
            )
            .peek(
                lambda doc: log.info(
                    "topology.loaded",
                    path=str(self._path),
                    cluster=doc.name,
                    namespace=doc.namespace,
                    nodes=len(doc.nodes),
                )
            )
        )

    def load(self) -> Result[ClusterSnapshot]:
        return self.document().map(TopologyDocument.to_snapshot)
