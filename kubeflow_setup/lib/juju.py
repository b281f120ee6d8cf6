from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Set

from .command import run_cmd

logger = logging.getLogger(__name__)


def _names(payload: str, key: str) -> Set[str]:
    """Collect names from `juju <list> --format=json` output."""
    if not payload.strip():
        return set()
    data = json.loads(payload)
    items = data.get(key) if isinstance(data, dict) else None
    if isinstance(items, dict):
        return set(items)
    if isinstance(items, list):
        out = set()
        for it in items:
            if isinstance(it, dict):
                # models carry "short-name" in addition to the qualified "name"
                name = it.get("short-name") or it.get("name")
                if name:
                    out.add(str(name))
        return out
    return set()


@dataclass(frozen=True)
class Juju:
    dry_run: bool = False

    def _query(self, argv: list[str]) -> str:
        if self.dry_run:
            run_cmd(argv, dry_run=True)
            return ""
        return run_cmd(argv).stdout

    def cloud_registered(self, name: str) -> bool:
        payload = self._query(["juju", "clouds", "--client", "--format=json"])
        if not payload.strip():
            return False
        data = json.loads(payload)
        return isinstance(data, dict) and name in data

    def register_cloud(self, name: str, kubeconfig: str) -> None:
        run_cmd(["juju", "add-k8s", name, "--client"], input_text=kubeconfig, dry_run=self.dry_run)

    def controller_exists(self, name: str) -> bool:
        return name in _names(self._query(["juju", "controllers", "--format=json"]), "controllers")

    def bootstrap_controller(self, cloud: str, name: str) -> None:
        run_cmd(["juju", "bootstrap", cloud, name], dry_run=self.dry_run)

    def model_exists(self, name: str) -> bool:
        return name in _names(self._query(["juju", "models", "--format=json"]), "models")

    def create_model(self, name: str) -> None:
        run_cmd(["juju", "add-model", name], dry_run=self.dry_run)

    def deployed_apps(self) -> Set[str]:
        return _names(self._query(["juju", "status", "--format=json"]), "applications")

    def deploy(self, app: str, *, channel: str, trust: bool = False) -> None:
        argv = ["juju", "deploy", app]
        if trust:
            argv.append("--trust")
        argv.append(f"--channel={channel}")
        run_cmd(argv, dry_run=self.dry_run)
