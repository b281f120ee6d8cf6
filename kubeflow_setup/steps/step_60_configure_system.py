from __future__ import annotations

import logging

from ..context import SetupCtx

logger = logging.getLogger(__name__)


class ConfigureSystemStep:
    name = "system_configured"

    def run(self, ctx: SetupCtx) -> None:
        params = ctx.cfg.sysctl
        for key, value in params.items():
            ctx.kernel.set_param(key, value)
        for key, value in params.items():
            ctx.kernel.persist_param(key, value)
        logger.info("Kernel parameters applied: %s", ", ".join(f"{k}={v}" for k, v in params.items()))
