"""
Naming — canonical names derived from a NiFi cluster.

Pure functions, no I/O. Every string a certificate or a Kubernetes object
needs is computed here from the templates in `nifi_pki.domain.templates`:

  common_name()         → <name>-<service>.<namespace>.svc.<domain>
  internal_dns_names()  → node SANs, most-qualified first
  labels_for_pki()      → {"app": "nifi", "nifi_issuer": <issuer>}

The service suffix is `headless` when the headless service is enabled,
`all-node` otherwise.
"""

from __future__ import annotations

from nifi_pki.domain import templates
from nifi_pki.domain.errors import InvalidNodeIdError
from nifi_pki.domain.models import ClusterTopology


def service_name(name: str, headless_service_enabled: bool) -> str:
    """Name of the service fronting the cluster nodes."""
    if headless_service_enabled:
        return templates.HEADLESS_SERVICE_TEMPLATE.format(name=name)
    return templates.ALL_NODE_SERVICE_TEMPLATE.format(name=name)


def common_name(
    name: str,
    namespace: str,
    headless_service_enabled: bool,
    cluster_domain: str = templates.CLUSTER_DOMAIN,
) -> str:
    """
    Fully qualified name of the cluster service, used as the cluster CN.

    >>> common_name("test-cluster", "test-namespace", True)
    'test-cluster-headless.test-namespace.svc.cluster.local'
    """
    return f"{service_name(name, headless_service_enabled)}.{namespace}.svc.{cluster_domain}"


def cluster_common_name(topology: ClusterTopology, cluster_domain: str = templates.CLUSTER_DOMAIN) -> str:
    return common_name(topology.name, topology.namespace, topology.headless_service_enabled, cluster_domain)


def node_name(name: str, node_id: int) -> str:
    """Bare node name; also the name of the node's NifiUser."""
    return templates.NODE_NAME_TEMPLATE.format(name=name, node_id=node_id)


def node_secret_name(name: str, node_id: int) -> str:
    """Secret holding the node's server certificate."""
    return templates.NODE_SERVER_CERT_TEMPLATE.format(name=name, node_id=node_id)


def internal_dns_names(
    topology: ClusterTopology,
    node_id: int,
    cluster_domain: str = templates.CLUSTER_DOMAIN,
) -> tuple[str, ...]:
    """
    DNS SANs of a node, from the fully qualified name down to the bare node name.

    Index 0 is the canonical name of the node. Raises InvalidNodeIdError
    when `node_id` is not part of the topology.
    """
    if node_id not in topology.node_ids:
        raise InvalidNodeIdError(topology.name, node_id)

    node = node_name(topology.name, node_id)
    service = f"{node}.{service_name(topology.name, topology.headless_service_enabled)}"
    return (
        f"{service}.{topology.namespace}.svc.{cluster_domain}",
        f"{service}.{topology.namespace}.svc",
        f"{service}.{topology.namespace}",
        service,
        node,
    )


def issuer_name(name: str) -> str:
    return templates.NODE_ISSUER_TEMPLATE.format(name=name)


def self_signer_name(name: str) -> str:
    return templates.NODE_SELF_SIGNER_TEMPLATE.format(name=name)


def ca_secret_name(name: str) -> str:
    return templates.NODE_CA_CERT_TEMPLATE.format(name=name)


def controller_name(name: str) -> str:
    """Controller principal name; also its certificate secret name."""
    return templates.NODE_CONTROLLER_TEMPLATE.format(name=name)


def controller_user_name(
    name: str,
    namespace: str,
    cluster_domain: str = templates.CLUSTER_DOMAIN,
) -> str:
    """Name of the controller NifiUser: the controller FQDN in the management zone."""
    return templates.NODE_CONTROLLER_FQDN_TEMPLATE.format(
        controller=controller_name(name),
        namespace=namespace,
        cluster_domain=cluster_domain,
    )


def labels_for_pki(name: str) -> dict[str, str]:
    """Selector labels shared by every PKI object of a cluster."""
    return {
        "app": templates.APP_LABEL,
        "nifi_issuer": issuer_name(name),
    }
