from __future__ import annotations

import logging

from ..context import SetupCtx

logger = logging.getLogger(__name__)


class CreateModelStep:
    name = "model_created"

    def run(self, ctx: SetupCtx) -> None:
        model = ctx.cfg.juju_model
        if ctx.juju.model_exists(model):
            logger.info("Juju model '%s' already exists.", model)
            return
        ctx.juju.create_model(model)
