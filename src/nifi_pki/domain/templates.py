"""
Naming templates for every PKI-related object of a NiFi cluster.

All names derived from a cluster live here so that their uniqueness can be
checked in one place: every per-node template embeds the node id, every
per-cluster template embeds the cluster name.
"""

from __future__ import annotations

CLUSTER_DOMAIN = "cluster.local"

API_GROUP_VERSION = "nifi.orange.com/v1alpha1"
CLUSTER_KIND = "NifiCluster"
USER_KIND = "NifiUser"

APP_LABEL = "nifi"

# Services
HEADLESS_SERVICE_TEMPLATE = "{name}-headless"
ALL_NODE_SERVICE_TEMPLATE = "{name}-all-node"

# Nodes
NODE_NAME_TEMPLATE = "{name}-{node_id}-node"
NODE_SERVER_CERT_TEMPLATE = "{name}-{node_id}-server-certificate"

# Cluster-wide PKI objects
NODE_ISSUER_TEMPLATE = "{name}-issuer"
NODE_SELF_SIGNER_TEMPLATE = "{name}-self-signer"
NODE_CA_CERT_TEMPLATE = "{name}-ca-certificate"
NODE_CONTROLLER_TEMPLATE = "{name}-controller"
NODE_CONTROLLER_FQDN_TEMPLATE = "{controller}.{namespace}.mgt.{cluster_domain}"
