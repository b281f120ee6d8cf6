from __future__ import annotations

import logging

from ..context import SetupCtx

logger = logging.getLogger(__name__)


class AddK8sCloudStep:
    name = "juju_configured"

    def run(self, ctx: SetupCtx) -> None:
        cloud = ctx.cfg.juju_cloud
        if ctx.juju.cloud_registered(cloud):
            logger.info("Kubernetes cloud '%s' already added to Juju.", cloud)
            return
        ctx.juju.register_cloud(cloud, ctx.microk8s.config())
