"""
Unit tests for the main module — composition root.

Tests verify structlog configuration and the end-to-end wiring against
files in a temporary directory.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import structlog

from nifi_pki.config import AppSettings
from nifi_pki.main import configure_structlog, main, run


def _topology_file(tmp_path: Path) -> Path:
    path = tmp_path / "topology.json"
    path.write_text(
        json.dumps({"name": "test-cluster", "namespace": "test-namespace", "nodes": [{"id": 0}, {"id": 1}]}),
        encoding="utf-8",
    )
    return path


class TestConfigureStructlog:
    def test_configure_structlog_sets_log_level(self) -> None:
        configure_structlog("WARNING")
        assert structlog.get_logger() is not None

    def test_configure_structlog_invalid_level_falls_back(self) -> None:
        """
        GIVEN an invalid log_level string
        WHEN configure_structlog is called
        THEN it falls back to INFO (no crash).
        """
        configure_structlog("NONEXISTENT")
        assert structlog.get_logger() is not None


class TestRun:
    def test_writes_manifests(self, tmp_path: Path) -> None:
        """
        GIVEN a two-node topology file and an output path
        WHEN run is called
        THEN it exits 0 and writes three NifiUser manifests.
        """
        output = tmp_path / "users.json"
        settings = AppSettings(_env_file=None, topology_path=_topology_file(tmp_path), output_path=output)  # type: ignore[call-arg]

        assert run(settings) == 0
        document = json.loads(output.read_text(encoding="utf-8"))
        assert len(document["items"]) == 3
        assert all(item["kind"] == "NifiUser" for item in document["items"])

    def test_missing_topology_exits_1(self, tmp_path: Path) -> None:
        settings = AppSettings(_env_file=None, topology_path=tmp_path / "nope.json")  # type: ignore[call-arg]
        assert run(settings) == 1


class TestMain:
    def test_configuration_error_exits_1(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TOPOLOGY_PATH", raising=False)
        with pytest.raises(SystemExit) as excinfo:
            main()
        assert excinfo.value.code == 1

    def test_success_exits_0(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        output = tmp_path / "out.json"
        monkeypatch.setenv("TOPOLOGY_PATH", str(_topology_file(tmp_path)))
        monkeypatch.setenv("OUTPUT_PATH", str(output))
        with pytest.raises(SystemExit) as excinfo:
            main()
        assert excinfo.value.code == 0
        assert output.exists()
