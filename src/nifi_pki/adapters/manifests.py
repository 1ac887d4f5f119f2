"""
Manifest adapter — UserResource → Kubernetes NifiUser manifest → JSON.

Rendering produces the mapping an API client would submit: camelCase
field names, `apiVersion`/`kind` set, status omitted (status belongs to the
issuer integration, never to the desired state). JsonManifestWriter
implements the ManifestSink port.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TextIO

import structlog
from railway import ErrorCode
from railway.result import Result

from nifi_pki.domain import templates
from nifi_pki.domain.models import OwnerReference, UserResource

log = structlog.get_logger()


def _owner_reference(ref: OwnerReference) -> dict[str, Any]:
    return {
        "apiVersion": ref.api_version,
        "kind": ref.kind,
        "name": ref.name,
        "uid": ref.uid,
        "controller": ref.controller,
        "blockOwnerDeletion": ref.block_owner_deletion,
    }


def to_manifest(user: UserResource) -> dict[str, Any]:
    """Render a NifiUser manifest as plain dicts and lists."""
    spec: dict[str, Any] = {
        "secretName": user.spec.secret_name,
        "clusterRef": {
            "name": user.spec.cluster_ref.name,
            "namespace": user.spec.cluster_ref.namespace,
        },
        "includeJKS": user.spec.include_jks,
    }
    if user.spec.dns_names:
        spec["dnsNames"] = list(user.spec.dns_names)

    return {
        "apiVersion": templates.API_GROUP_VERSION,
        "kind": templates.USER_KIND,
        "metadata": {
            "name": user.metadata.name,
            "namespace": user.metadata.namespace,
            "labels": dict(user.metadata.labels),
            "ownerReferences": [_owner_reference(ref) for ref in user.metadata.owner_references],
        },
        "spec": spec,
    }


def to_manifest_list(users: list[UserResource]) -> dict[str, Any]:
    """Wrap manifests in a `v1/List`, the shape `kubectl apply -f` accepts."""
    return {
        "apiVersion": "v1",
        "kind": "List",
        "items": [to_manifest(user) for user in users],
    }


class JsonManifestWriter:
    """
    Write a manifest list as JSON to a file, or to a stream when no path is given.

    Implements the ManifestSink port. Keys are sorted so repeated runs over
    the same topology produce identical output.
    """

    def __init__(self, path: Path | None = None, stream: TextIO | None = None) -> None:
        self._path = path
        self._stream = stream

    def write(self, manifests: Mapping[str, Any]) -> Result[int]:
        return Result.from_computation(
            lambda: self._do_write(manifests),
            ErrorCode.TECHNICAL_ERROR,
            f"Failed to write manifests to {self._target}",
        )

    @property
    def _target(self) -> str:
        return str(self._path) if self._path is not None else "stdout"

    def _do_write(self, manifests: Mapping[str, Any]) -> int:
        text = json.dumps(manifests, indent=2, sort_keys=True) + "\n"
        if self._path is not None:
            self._path.write_text(text, encoding="utf-8")
        else:
            (self._stream or sys.stdout).write(text)
        count = len(manifests.get("items", []))
        log.info("manifests.written", target=self._target, count=count)
        return count
