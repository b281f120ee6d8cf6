from __future__ import annotations

import logging

from ..context import SetupCtx

logger = logging.getLogger(__name__)


class VerifyMicroK8sStep:
    name = "microk8s_verified"

    def run(self, ctx: SetupCtx) -> None:
        report = ctx.microk8s.status()
        if report.text:
            logger.info("MicroK8s status:\n%s", report.text.rstrip())
        if not report.running:
            raise RuntimeError("MicroK8s is not running")
