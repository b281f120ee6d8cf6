from __future__ import annotations

import logging

from ..context import SetupCtx

logger = logging.getLogger(__name__)


class EnableAddonsStep:
    name = "addons_enabled"

    def run(self, ctx: SetupCtx) -> None:
        addons = ctx.cfg.microk8s_addons
        logger.info("Enabling MicroK8s add-ons: %s", " ".join(addons))
        ctx.microk8s.enable_addons(addons)
