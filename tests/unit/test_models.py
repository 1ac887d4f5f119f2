"""
Unit tests for domain models — value objects.

Verifies frozen dataclass behavior, topology normalisation and the
status-blind equality of UserResource.
"""

from __future__ import annotations

import pytest

from nifi_pki.domain.models import (
    ClusterReference,
    ClusterSnapshot,
    ClusterTopology,
    ObjectMeta,
    UserCertificate,
    UserResource,
    UserSpec,
    UserState,
    UserStatus,
)


class TestClusterTopology:
    def test_node_ids_become_frozenset(self) -> None:
        """
        GIVEN node ids passed as a list with a duplicate
        WHEN the topology is built
        THEN node_ids is a frozenset of the unique ids.
        """
        topology = ClusterTopology.of("c", "ns", [2, 0, 2, 1])
        assert topology.node_ids == frozenset({0, 1, 2})
        assert isinstance(topology.node_ids, frozenset)

    def test_sorted_node_ids(self) -> None:
        assert ClusterTopology.of("c", "ns", [5, 1, 3]).sorted_node_ids == (1, 3, 5)

    def test_defaults(self) -> None:
        topology = ClusterTopology.of("c", "ns", [0])
        assert topology.headless_service_enabled is False
        assert topology.uid == ""

    def test_negative_node_id_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            ClusterTopology.of("c", "ns", [0, -1])

    def test_frozen_prevents_mutation(self) -> None:
        topology = ClusterTopology.of("c", "ns", [0])
        with pytest.raises(AttributeError):
            topology.name = "other"  # type: ignore[misc]

    def test_equal_topologies(self) -> None:
        assert ClusterTopology.of("c", "ns", [1, 0]) == ClusterTopology.of("c", "ns", (0, 1))


class TestUserResource:
    def _user(self, status: UserStatus | None = None) -> UserResource:
        return UserResource(
            metadata=ObjectMeta(name="u", namespace="ns"),
            spec=UserSpec(secret_name="s", cluster_ref=ClusterReference("c", "ns")),
            status=status,
        )

    def test_status_excluded_from_equality(self) -> None:
        """
        GIVEN two users differing only in status
        WHEN compared
        THEN they are equal.
        """
        assert self._user() == self._user(UserStatus(UserState.ERROR))

    def test_hash_follows_equality(self) -> None:
        """
        GIVEN two equal users with labels, one carrying a status
        WHEN used as dict keys
        THEN they hash alike and address the same entry.
        """
        labelled = ObjectMeta(name="u", namespace="ns", labels={"app": "nifi"})
        spec = UserSpec(secret_name="s", cluster_ref=ClusterReference("c", "ns"))
        first = UserResource(metadata=labelled, spec=spec)
        second = UserResource(metadata=labelled, spec=spec, status=UserStatus(UserState.READY))
        assert hash(first) == hash(second)
        assert {first: "desired"}[second] == "desired"

    def test_spec_defaults(self) -> None:
        user = self._user()
        assert user.spec.dns_names == ()
        assert user.spec.include_jks is False
        assert user.name == "u"

    def test_user_states(self) -> None:
        assert [s.value for s in UserState] == ["Pending", "Created", "Ready", "Error"]


class TestUserCertificate:
    def test_secrets_hidden_from_repr(self) -> None:
        cert = UserCertificate(certificate=b"cert", key=b"key", password="hunter2")
        assert repr(cert) == "UserCertificate()"


class TestClusterSnapshot:
    def test_default_has_no_extra_hostnames(self) -> None:
        snapshot = ClusterSnapshot(ClusterTopology.of("c", "ns", [0]))
        assert snapshot.additional_hostnames == {}
