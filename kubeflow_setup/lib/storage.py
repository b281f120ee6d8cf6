from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from .command import run_cmd, sudo
from .files import append_line

logger = logging.getLogger(__name__)


def part_path(disk: str, n: int = 1) -> str:
    # nvme/mmcblk devices use p suffix
    if disk.endswith(tuple("0123456789")):
        return f"{disk}p{n}"
    return f"{disk}{n}"


def mounted_sources(mount_output: str) -> list[str]:
    return [line.split()[0] for line in mount_output.splitlines() if line.split()]


def source_of(mount_output: str, target: str) -> Optional[str]:
    # "<source> on <target> type <fstype> (<opts>)"
    for line in mount_output.splitlines():
        parts = line.split()
        if len(parts) >= 3 and parts[1] == "on" and parts[2] == target:
            return parts[0]
    return None


def has_root_mount(lsblk_output: str) -> bool:
    return any(line.rstrip().endswith(" /") for line in lsblk_output.splitlines())


@dataclass(frozen=True)
class DataDisk:
    """Block device discovery, partitioning and mounting for the data disk.

    Layout is one GPT partition spanning the disk, formatted ext4.
    """

    fstab_path: str = "/etc/fstab"
    dry_run: bool = False

    def _mount_table(self) -> str:
        return run_cmd(["mount"]).stdout

    def find_unmounted_block_device(self, candidates: Iterable[str]) -> Optional[str]:
        """First candidate that exists, is not mounted and does not hold /."""

        if self.dry_run:
            return None
        mount_out = self._mount_table()
        sources = mounted_sources(mount_out)
        for disk in candidates:
            if not Path(disk).is_block_device():
                continue
            if any(src.startswith(disk) for src in sources):
                logger.info("Skipping %s (mounted)", disk)
                continue
            lsblk = run_cmd(["lsblk", disk], check=False).stdout
            if has_root_mount(lsblk):
                logger.info("Skipping %s (root disk)", disk)
                continue
            return disk
        return None

    def mounted_source(self, target: str) -> Optional[str]:
        """Device mounted at target, if any."""
        if self.dry_run:
            return None
        return source_of(self._mount_table(), target)

    def partition(self, device: str) -> str:
        logger.info("Creating partition on %s", device)
        run_cmd(
            sudo(["parted", device, "--script", "mklabel", "gpt", "mkpart", "primary", "ext4", "0%", "100%"]),
            dry_run=self.dry_run,
        )
        return part_path(device)

    def wait_for_partition(self, partition: str, timeout: float = 5.0, interval: float = 0.5) -> bool:
        if self.dry_run:
            return True
        deadline = time.monotonic() + timeout
        while True:
            if Path(partition).is_block_device():
                return True
            if time.monotonic() >= deadline:
                return False
            time.sleep(interval)

    def format_filesystem(self, partition: str) -> None:
        run_cmd(sudo(["mkfs.ext4", "-F", partition]), dry_run=self.dry_run)

    def mount(self, partition: str, target: str) -> None:
        run_cmd(sudo(["mkdir", "-p", target]), dry_run=self.dry_run)
        run_cmd(sudo(["mount", partition, target]), dry_run=self.dry_run)

    def persist_mount_entry(self, partition: str, target: str) -> bool:
        return append_line(
            self.fstab_path,
            f"{partition} {target} ext4 defaults 0 2",
            key=f"{partition} {target}",
            dry_run=self.dry_run,
        )

    def chown(self, target: str, user: str) -> None:
        run_cmd(sudo(["chown", "-R", f"{user}:{user}", target]), dry_run=self.dry_run)

    def usage(self, target: str) -> str:
        return run_cmd(["df", "-h", target], check=False, dry_run=self.dry_run).stdout

    def list_block_devices(self) -> str:
        return run_cmd(["lsblk"], check=False, dry_run=self.dry_run).stdout
