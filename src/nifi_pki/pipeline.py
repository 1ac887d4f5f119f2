"""
Pipeline — load a cluster snapshot, synthesize its NifiUsers, write the manifests.

All I/O is injected via ports (Protocol interfaces); the stages are joined
with flat_map so the first failure short-circuits the rest:

  source.load()
    → synthesize_users(snapshot)
      → to_manifest_list(users)
        → sink.write(manifests)
"""

from __future__ import annotations

from railway import ErrorCode
from railway.result import Result

from nifi_pki.adapters.manifests import to_manifest_list
from nifi_pki.domain import templates
from nifi_pki.domain.models import ClusterSnapshot, UserResource
from nifi_pki.domain.ports import ManifestSink, TopologySource
from nifi_pki.users import desired_users_for_cluster


def synthesize_users(
    snapshot: ClusterSnapshot,
    cluster_domain: str = templates.CLUSTER_DOMAIN,
) -> Result[list[UserResource]]:
    """
    Desired NifiUser set of a snapshot.

    Hostname collisions between nodes surface as VALIDATION_ERROR.
    """
    return Result.from_computation(
        lambda: desired_users_for_cluster(
            snapshot.topology,
            snapshot.additional_hostnames,
            cluster_domain,
        ),
        ErrorCode.VALIDATION_ERROR,
        f"Cannot synthesize users for cluster {snapshot.topology.name!r}",
    )


def run_pipeline(
    source: TopologySource,
    sink: ManifestSink,
    cluster_domain: str = templates.CLUSTER_DOMAIN,
) -> Result[int]:
    """
    Render the desired NifiUsers of one cluster.

    Returns Result[int] with the number of manifests written, or the failure
    of the first stage that failed.
    """
    return (
        source.load()
        .flat_map(lambda snapshot: synthesize_users(snapshot, cluster_domain))
        .map(to_manifest_list)
        .flat_map(sink.write)
    )
