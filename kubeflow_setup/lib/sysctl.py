from __future__ import annotations

import logging
from dataclasses import dataclass

from .command import run_cmd, sudo
from .files import append_line

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KernelParams:
    conf_path: str = "/etc/sysctl.conf"
    dry_run: bool = False

    def set_param(self, key: str, value: str) -> None:
        run_cmd(sudo(["sysctl", f"{key}={value}"]), dry_run=self.dry_run)

    def persist_param(self, key: str, value: str) -> bool:
        return append_line(self.conf_path, f"{key}={value}", dry_run=self.dry_run)
