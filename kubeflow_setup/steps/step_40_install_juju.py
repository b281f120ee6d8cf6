from __future__ import annotations

import logging
from pathlib import Path

from ..context import SetupCtx

logger = logging.getLogger(__name__)


class InstallJujuStep:
    name = "juju_installed"

    def run(self, ctx: SetupCtx) -> None:
        if ctx.snap.is_installed("juju"):
            logger.info("Juju is already installed.")
        else:
            ctx.snap.install("juju", channel=ctx.cfg.juju_channel)

        # Juju keeps its client config under ~/.local/share
        share = Path("~/.local/share").expanduser()
        if ctx.dry_run:
            logger.info("Would create %s", share)
        else:
            share.mkdir(parents=True, exist_ok=True)
