"""Domain exceptions for identity synthesis."""

from __future__ import annotations


class MalformedSubjectError(ValueError):
    """The subject of a certificate could not be read."""


class InvalidNodeIdError(ValueError):
    """A node id was passed that is not part of the cluster topology."""

    def __init__(self, cluster: str, node_id: int) -> None:
        super().__init__(f"node id {node_id} is not part of cluster {cluster!r}")
        self.cluster = cluster
        self.node_id = node_id
