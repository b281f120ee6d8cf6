from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .command import run_cmd, sudo

logger = logging.getLogger(__name__)


def has_entry(path: str, key: str) -> bool:
    """True if some line of path starts with the whitespace-separated fields of key.

    "/dev/sdc1 /data" matches "/dev/sdc1 /data ext4 defaults,nofail 0 2".
    """
    p = Path(path)
    if not p.exists():
        return False
    want = key.split()
    for line in p.read_text(encoding="utf-8").splitlines():
        if line.split()[: len(want)] == want:
            return True
    return False


def append_line(path: str, line: str, *, key: Optional[str] = None, dry_run: bool = False) -> bool:
    """Append line to a root-owned file unless an entry for key is already there.

    key defaults to the whole line. Returns True if the line was appended.
    """
    if has_entry(path, key or line):
        logger.info("%s already has an entry for %s", path, key or line)
        return False
    run_cmd(sudo(["tee", "-a", path]), input_text=line + "\n", dry_run=dry_run)
    return True
