from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .lib.groups import UserGroups, current_user
from .lib.juju import Juju
from .lib.microk8s import MicroK8s
from .lib.snap import SnapInstaller
from .lib.storage import DataDisk
from .lib.sysctl import KernelParams
from .setup_config import SetupConfig


@dataclass
class SetupCtx:
    """Everything a step needs: config plus one object per external tool."""

    cfg: SetupConfig
    user: str
    snap: Any
    groups: Any
    microk8s: Any
    juju: Any
    kernel: Any
    disk: Any
    dry_run: bool = False
    warnings: List[Dict[str, Any]] = field(default_factory=list)

    def warn(self, **details: Any) -> None:
        self.warnings.append(details)


def build_ctx(cfg: SetupConfig, *, dry_run: bool = False) -> SetupCtx:
    return SetupCtx(
        cfg=cfg,
        user=current_user(),
        snap=SnapInstaller(dry_run=dry_run),
        groups=UserGroups(dry_run=dry_run),
        microk8s=MicroK8s(dry_run=dry_run),
        juju=Juju(dry_run=dry_run),
        kernel=KernelParams(conf_path=cfg.sysctl_conf, dry_run=dry_run),
        disk=DataDisk(fstab_path=cfg.fstab_path, dry_run=dry_run),
        dry_run=dry_run,
    )
