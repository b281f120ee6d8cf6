from __future__ import annotations

import logging

from ..context import SetupCtx

logger = logging.getLogger(__name__)


class WaitMicroK8sReadyStep:
    name = "microk8s_ready"

    def run(self, ctx: SetupCtx) -> None:
        logger.info("Waiting for MicroK8s to be ready...")
        ctx.microk8s.wait_ready(timeout=ctx.cfg.microk8s_wait_timeout)
