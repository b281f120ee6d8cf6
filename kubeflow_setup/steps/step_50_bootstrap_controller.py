from __future__ import annotations

import logging

from ..context import SetupCtx

logger = logging.getLogger(__name__)


class BootstrapControllerStep:
    name = "juju_bootstrapped"

    def run(self, ctx: SetupCtx) -> None:
        controller = ctx.cfg.juju_controller
        if ctx.juju.controller_exists(controller):
            logger.info("Juju controller '%s' already exists.", controller)
            return
        ctx.juju.bootstrap_controller(ctx.cfg.juju_cloud, controller)
