from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .command import run_cmd

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatusReport:
    running: bool
    text: str


def parse_status(text: str) -> StatusReport:
    running = "microk8s is running" in text.lower()
    return StatusReport(running=running, text=text)


@dataclass(frozen=True)
class MicroK8s:
    """Control-plane commands. Relies on the caller being in the microk8s group."""

    dry_run: bool = False

    def wait_ready(self, timeout: Optional[int] = None) -> None:
        argv = ["microk8s", "status", "--wait-ready"]
        if timeout is not None:
            argv += ["--timeout", str(timeout)]
        run_cmd(argv, dry_run=self.dry_run)

    def enable_addons(self, addons: Sequence[str]) -> None:
        if not addons:
            return
        run_cmd(["microk8s", "enable", *addons], dry_run=self.dry_run)

    def status(self) -> StatusReport:
        if self.dry_run:
            run_cmd(["microk8s", "status"], dry_run=True)
            return StatusReport(running=True, text="")
        r = run_cmd(["microk8s", "status"], check=False)
        return parse_status(r.stdout)

    def config(self) -> str:
        """Kubeconfig for the local cluster."""
        return run_cmd(["microk8s", "config"], dry_run=self.dry_run).stdout
