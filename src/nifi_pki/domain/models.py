"""
Domain models — immutable value objects for cluster topology and NifiUser resources.

ClusterTopology is the input snapshot; everything else is derived from it.
A UserResource mirrors the NifiUser custom resource: metadata + spec are the
desired state, status is filled in later by the issuer integration and is
never part of desired-state equality.

All models are frozen dataclasses so a snapshot cannot change while it is
being synthesized.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True, slots=True)
class ClusterTopology:
    """
    The minimal shape of a NiFi cluster needed to derive every identity.

    `uid` is the UID of the owning NifiCluster object, copied into owner
    references. Node ids are stored as a frozenset; use `sorted_node_ids`
    wherever output order matters.
    """

    name: str
    namespace: str
    node_ids: frozenset[int]
    headless_service_enabled: bool = False
    uid: str = ""

    def __post_init__(self) -> None:
        ids = frozenset(self.node_ids)
        negative = sorted(i for i in ids if i < 0)
        if negative:
            raise ValueError(f"node ids must be non-negative, got {negative}")
        object.__setattr__(self, "node_ids", ids)

    @classmethod
    def of(
        cls,
        name: str,
        namespace: str,
        node_ids: Iterable[int],
        headless_service_enabled: bool = False,
        uid: str = "",
    ) -> ClusterTopology:
        return cls(name, namespace, frozenset(node_ids), headless_service_enabled, uid)

    @property
    def sorted_node_ids(self) -> tuple[int, ...]:
        return tuple(sorted(self.node_ids))


@dataclass(frozen=True, slots=True)
class ClusterReference:
    name: str
    namespace: str


@dataclass(frozen=True, slots=True)
class NodeIdentity:
    """Certificate identity of a single node, recomputed on every call."""

    node_id: int
    dns_names: tuple[str, ...]
    secret_name: str


@dataclass(frozen=True, slots=True)
class UserSpec:
    """Desired state of a NifiUser. `dns_names` is ordered, most-qualified first."""

    secret_name: str
    cluster_ref: ClusterReference
    dns_names: tuple[str, ...] = ()
    include_jks: bool = False


@dataclass(frozen=True, slots=True)
class OwnerReference:
    api_version: str
    kind: str
    name: str
    uid: str
    controller: bool = True
    block_owner_deletion: bool = True


@dataclass(frozen=True, slots=True)
class ObjectMeta:
    name: str
    namespace: str
    # compared, not hashed: users can go into sets and dict keys
    labels: dict[str, str] = field(default_factory=dict, hash=False)
    owner_references: tuple[OwnerReference, ...] = ()


class UserState(Enum):
    """Lifecycle of a NifiUser as reported by the issuer integration."""

    PENDING = "Pending"
    CREATED = "Created"
    READY = "Ready"
    ERROR = "Error"


@dataclass(frozen=True, slots=True)
class UserStatus:
    state: UserState
    acls: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class UserResource:
    """
    A NifiUser resource.

    `status` is excluded from equality: two resources are equal when their
    desired state (metadata + spec) is equal.
    """

    metadata: ObjectMeta
    spec: UserSpec
    status: UserStatus | None = field(default=None, compare=False)

    @property
    def name(self) -> str:
        return self.metadata.name


@dataclass(frozen=True, slots=True)
class SubjectAttribute:
    """
    One attribute of a certificate subject, in certificate order.

    `key` is the short RFC 4514 name (C, O, OU, CN, ...) or a dotted OID for
    attributes without one.
    """

    key: str
    value: str


@dataclass(frozen=True, slots=True)
class UserCertificate:
    """
    Key material issued for a NifiUser.

    `certificate`, `key` and `ca` are PEM or DER encoded; `jks` holds the
    Java keystore when the user requested one.
    """

    certificate: bytes = field(repr=False)
    key: bytes = field(default=b"", repr=False)
    ca: bytes = field(default=b"", repr=False)
    jks: bytes = field(default=b"", repr=False)
    password: str = field(default="", repr=False)


@dataclass(frozen=True, slots=True)
class ClusterSnapshot:
    """
    A topology together with the per-node extra hostnames it was declared with.

    Extra hostnames are appended to a node's SANs (external listener names).
    """

    topology: ClusterTopology
    additional_hostnames: dict[int, tuple[str, ...]] = field(default_factory=dict)
