from __future__ import annotations

import logging

from ..context import SetupCtx

logger = logging.getLogger(__name__)


class DeployKubeflowStep:
    name = "kubeflow_deployed"

    def run(self, ctx: SetupCtx) -> None:
        dashboard = ctx.cfg.kubeflow_dashboard_app
        if dashboard in ctx.juju.deployed_apps():
            logger.info("Kubeflow appears to be already deployed.")
            return

        logger.info("Deploying Kubeflow (this may take some time)...")
        ctx.juju.deploy("kubeflow", channel=ctx.cfg.kubeflow_channel, trust=True)
        logger.info("Kubeflow deployment initiated; it may take up to 20 minutes to settle.")
        logger.info("Check progress with: juju status --watch 5s")
