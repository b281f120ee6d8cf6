from __future__ import annotations

import logging

from ..context import SetupCtx
from ..errors import PauseRequested

logger = logging.getLogger(__name__)


class ConfigureUserStep:
    """Put the user in the microk8s group and prepare ~/.kube.

    Group membership only applies to a new login session, so after usermod the
    run pauses and this step is retried once the operator has logged in again.
    """

    name = "user_configured"

    def run(self, ctx: SetupCtx) -> None:
        group = ctx.cfg.microk8s_group
        if not ctx.groups.current_user_in_group(group):
            ctx.groups.add_user_to_group(ctx.user, group)
            logger.info("User %s added to %s group.", ctx.user, group)
            raise PauseRequested(
                f"You need to log out and back in, or run 'newgrp {group}' to apply the group change. "
                "After that, please run this command again."
            )

        logger.info("User is already in %s group.", group)
        ctx.groups.ensure_owned_dir("~/.kube", ctx.user)
