"""
Desired NifiUser set — one user per node plus one controller user.

Pure business logic, no I/O. For a topology with node ids N the desired set
holds |N| + 1 resources:

  node users        name=<name>-<id>-node          secret=<name>-<id>-server-certificate
  controller user   name=<name>-controller.<ns>.mgt.<domain>   secret=<name>-controller

Node users are emitted in ascending node-id order and the controller comes
last, so the same topology always yields the same list.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from typing import TypeAlias

from nifi_pki import naming
from nifi_pki.domain import templates
from nifi_pki.domain.errors import InvalidNodeIdError
from nifi_pki.domain.models import (
    ClusterReference,
    ClusterTopology,
    NodeIdentity,
    ObjectMeta,
    OwnerReference,
    UserResource,
    UserSpec,
)

AdditionalHostnames: TypeAlias = Mapping[int, Iterable[str]]


def owner_reference(topology: ClusterTopology) -> OwnerReference:
    """Owner reference pointing at the NifiCluster, so users are garbage-collected with it."""
    return OwnerReference(
        api_version=templates.API_GROUP_VERSION,
        kind=templates.CLUSTER_KIND,
        name=topology.name,
        uid=topology.uid,
    )


def object_meta(name: str, topology: ClusterTopology) -> ObjectMeta:
    return ObjectMeta(
        name=name,
        namespace=topology.namespace,
        labels=naming.labels_for_pki(topology.name),
        owner_references=(owner_reference(topology),),
    )


def cluster_reference(topology: ClusterTopology) -> ClusterReference:
    return ClusterReference(name=topology.name, namespace=topology.namespace)


def node_identity(
    topology: ClusterTopology,
    node_id: int,
    additional_hostnames: Iterable[str] = (),
    cluster_domain: str = templates.CLUSTER_DOMAIN,
) -> NodeIdentity:
    """
    Certificate identity of one node.

    Additional hostnames (external listener names) are appended after the
    internal names; names already present are not repeated.
    """
    dns_names = list(naming.internal_dns_names(topology, node_id, cluster_domain))
    for hostname in additional_hostnames:
        if hostname not in dns_names:
            dns_names.append(hostname)
    return NodeIdentity(
        node_id=node_id,
        dns_names=tuple(dns_names),
        secret_name=naming.node_secret_name(topology.name, node_id),
    )


def node_user_for_cluster_node(
    topology: ClusterTopology,
    node_id: int,
    additional_hostnames: Iterable[str] = (),
    cluster_domain: str = templates.CLUSTER_DOMAIN,
) -> UserResource:
    identity = node_identity(topology, node_id, additional_hostnames, cluster_domain)
    return UserResource(
        metadata=object_meta(naming.node_name(topology.name, node_id), topology),
        spec=UserSpec(
            secret_name=identity.secret_name,
            cluster_ref=cluster_reference(topology),
            dns_names=identity.dns_names,
            include_jks=True,
        ),
    )


def node_users_for_cluster(
    topology: ClusterTopology,
    additional_hostnames: AdditionalHostnames | None = None,
    cluster_domain: str = templates.CLUSTER_DOMAIN,
) -> list[UserResource]:
    """
    One NifiUser per node, in ascending node-id order.

    `additional_hostnames` maps a node id to extra SANs for that node. Raises
    InvalidNodeIdError for a node id outside the topology and ValueError when
    an extra hostname would end up in the SANs of more than one node.

    There is no cluster-wide hostname list: a name added to every node (an
    external load-balancer hostname, say) would give all node certificates a
    common SAN, so such a name is rejected like any other shared one. Give it
    to the controller's certificate or to the node that owns the listener.
    """
    extra = dict(additional_hostnames or {})
    for node_id in extra:
        if node_id not in topology.node_ids:
            raise InvalidNodeIdError(topology.name, node_id)

    users = [
        node_user_for_cluster_node(topology, node_id, extra.get(node_id, ()), cluster_domain)
        for node_id in topology.sorted_node_ids
    ]

    counts = Counter(name for user in users for name in user.spec.dns_names)
    shared = sorted(name for name, count in counts.items() if count > 1)
    if shared:
        raise ValueError(f"DNS names shared by several nodes: {shared}")
    return users


def controller_user_for_cluster(
    topology: ClusterTopology,
    cluster_domain: str = templates.CLUSTER_DOMAIN,
) -> UserResource:
    """The administrative principal the operator uses to talk to the cluster."""
    return UserResource(
        metadata=object_meta(
            naming.controller_user_name(topology.name, topology.namespace, cluster_domain),
            topology,
        ),
        spec=UserSpec(
            secret_name=naming.controller_name(topology.name),
            cluster_ref=cluster_reference(topology),
            include_jks=True,
        ),
    )


def desired_users_for_cluster(
    topology: ClusterTopology,
    additional_hostnames: AdditionalHostnames | None = None,
    cluster_domain: str = templates.CLUSTER_DOMAIN,
) -> list[UserResource]:
    """Every NifiUser the cluster needs: node users, then the controller user."""
    return [
        *node_users_for_cluster(topology, additional_hostnames, cluster_domain),
        controller_user_for_cluster(topology, cluster_domain),
    ]
