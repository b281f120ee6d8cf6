from __future__ import annotations

import logging
from dataclasses import dataclass

from .command import run_cmd, sudo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SnapInstaller:
    dry_run: bool = False

    def is_installed(self, name: str) -> bool:
        if self.dry_run:
            # Report missing so the plan shows the install command.
            return False
        r = run_cmd(["snap", "list", name], check=False)
        return r.ok

    def install(self, name: str, *, channel: str, classic: bool = False) -> None:
        argv = ["snap", "install", name, f"--channel={channel}"]
        if classic:
            argv.append("--classic")
        run_cmd(sudo(argv), dry_run=self.dry_run)
        logger.info("Installed snap %s (%s)", name, channel)
