"""
Membership — does a desired NifiUser already exist among the actual ones?

Equality is structural over metadata (name, namespace, labels, owner
references) and spec. Status never takes part: a user the issuer has
marked Ready is still equal to the freshly synthesized desired user.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from nifi_pki.domain.models import UserResource


def user_equal(left: UserResource, right: UserResource) -> bool:
    return left.metadata == right.metadata and left.spec == right.spec


def user_slice_contains(users: Iterable[UserResource], candidate: UserResource) -> bool:
    """Linear containment check."""
    return any(user_equal(user, candidate) for user in users)


def index_by_name(users: Iterable[UserResource]) -> dict[str, UserResource]:
    """Key users by resource name. Later entries win on duplicate names."""
    return {user.name: user for user in users}


def index_contains(index: Mapping[str, UserResource], candidate: UserResource) -> bool:
    """Same answer as user_slice_contains when resource names are unique, via a prebuilt index."""
    existing = index.get(candidate.name)
    return existing is not None and user_equal(existing, candidate)
