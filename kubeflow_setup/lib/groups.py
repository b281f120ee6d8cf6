from __future__ import annotations

import getpass
import logging
from dataclasses import dataclass
from pathlib import Path

from .command import run_cmd, sudo

logger = logging.getLogger(__name__)


def current_user() -> str:
    return getpass.getuser()


@dataclass(frozen=True)
class UserGroups:
    dry_run: bool = False

    def current_user_in_group(self, name: str) -> bool:
        """True if the running login session already carries the group.

        This looks at the session (`id -nG`), not /etc/group: after usermod the
        membership only shows up here once the user logs in again.
        """
        if self.dry_run:
            return True
        r = run_cmd(["id", "-nG"])
        return name in r.stdout.split()

    def add_user_to_group(self, user: str, name: str) -> None:
        run_cmd(sudo(["usermod", "-a", "-G", name, user]), dry_run=self.dry_run)

    def ensure_owned_dir(self, path: str, user: str) -> None:
        p = Path(path).expanduser()
        if self.dry_run:
            logger.info("Would create %s owned by %s", p, user)
            return
        p.mkdir(parents=True, exist_ok=True)
        run_cmd(sudo(["chown", "-f", "-R", user, str(p)]))
