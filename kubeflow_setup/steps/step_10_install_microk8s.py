from __future__ import annotations

import logging

from ..context import SetupCtx

logger = logging.getLogger(__name__)


class InstallMicroK8sStep:
    name = "microk8s_installed"

    def run(self, ctx: SetupCtx) -> None:
        if ctx.snap.is_installed("microk8s"):
            logger.info("MicroK8s is already installed.")
            return
        ctx.snap.install("microk8s", channel=ctx.cfg.microk8s_channel, classic=True)
