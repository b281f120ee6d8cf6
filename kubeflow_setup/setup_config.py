from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

DEFAULT_SYSCTL = {
    "fs.inotify.max_user_instances": "1280",
    "fs.inotify.max_user_watches": "655360",
}

DEFAULT_DISK_CANDIDATES = ["/dev/sdb", "/dev/sdc", "/dev/sdd", "/dev/nvme0n1", "/dev/nvme1n1"]


@dataclass(frozen=True)
class SetupConfig:
    raw: Dict[str, Any] = field(default_factory=dict)

    def _section(self, name: str) -> Dict[str, Any]:
        return self.raw.get(name) or {}

    @property
    def progress_file(self) -> str:
        return str(self.raw.get("progress_file") or "~/.kubeflow_setup_progress")

    @property
    def log_path(self) -> str:
        return str(self.raw.get("log_path") or "~/.kubeflow_setup.log")

    @property
    def microk8s_channel(self) -> str:
        return str(self._section("microk8s").get("channel") or "1.32/stable")

    @property
    def microk8s_group(self) -> str:
        return str(self._section("microk8s").get("group") or "microk8s")

    @property
    def metallb_range(self) -> str:
        return str(self._section("microk8s").get("metallb_range") or "23.97.60.8/32")

    @property
    def microk8s_addons(self) -> List[str]:
        addons = self._section("microk8s").get("addons")
        if addons is None:
            return ["dns", "hostpath-storage", f"metallb:{self.metallb_range}", "rbac"]
        return [str(a) for a in addons]

    @property
    def microk8s_wait_timeout(self) -> Optional[int]:
        t = self._section("microk8s").get("wait_timeout")
        return int(t) if t is not None else None

    @property
    def juju_channel(self) -> str:
        return str(self._section("juju").get("channel") or "3.6/stable")

    @property
    def juju_cloud(self) -> str:
        return str(self._section("juju").get("cloud") or "my-k8s")

    @property
    def juju_controller(self) -> str:
        return str(self._section("juju").get("controller") or "uk8sx")

    @property
    def juju_model(self) -> str:
        return str(self._section("juju").get("model") or "kubeflow")

    @property
    def kubeflow_channel(self) -> str:
        return str(self._section("kubeflow").get("channel") or "1.10/stable")

    @property
    def kubeflow_dashboard_app(self) -> str:
        return str(self._section("kubeflow").get("dashboard_app") or "kubeflow-dashboard")

    @property
    def kubeflow_dashboard_port(self) -> int:
        return int(self._section("kubeflow").get("dashboard_port") or 8080)

    @property
    def sysctl(self) -> Dict[str, str]:
        params = self.raw.get("sysctl")
        if params is None:
            return dict(DEFAULT_SYSCTL)
        if not isinstance(params, dict):
            raise ValueError("sysctl must be a mapping of key -> value")
        return {str(k): str(v) for k, v in params.items()}

    @property
    def sysctl_conf(self) -> str:
        return str(self.raw.get("sysctl_conf") or "/etc/sysctl.conf")

    @property
    def disk_candidates(self) -> List[str]:
        c = self._section("data_disk").get("candidates")
        return [str(d) for d in c] if c is not None else list(DEFAULT_DISK_CANDIDATES)

    @property
    def data_mount_point(self) -> str:
        return str(self._section("data_disk").get("mount_point") or "/data")

    @property
    def fstab_path(self) -> str:
        return str(self._section("data_disk").get("fstab") or "/etc/fstab")

    @property
    def partition_wait_seconds(self) -> float:
        v = self._section("data_disk").get("partition_wait_seconds")
        return float(v) if v is not None else 5.0


def load_setup_config(path: Optional[str]) -> SetupConfig:
    """Load setup.yaml; with no path, every setting takes its default."""

    if path is None:
        return SetupConfig()

    p = Path(path).expanduser()
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("setup config must be YAML")

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError("setup config must contain a mapping/object")

    return SetupConfig(raw=raw)
