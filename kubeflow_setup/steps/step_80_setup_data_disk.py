from __future__ import annotations

import logging
from typing import Iterable

from ..context import SetupCtx

logger = logging.getLogger(__name__)


def _from_candidates(source: str, candidates: Iterable[str]) -> bool:
    return any(source.startswith(disk) for disk in candidates)


class SetupDataDiskStep:
    """Partition, format and mount an attached data disk.

    Missing hardware is not an error: every early return below still lets the
    step complete. A disk already mounted at the mount point by an earlier,
    interrupted run only gets its fstab entry and ownership finished.
    """

    # Last token written by the shell script this tool replaces.
    name = "completed"

    def run(self, ctx: SetupCtx) -> None:
        disk = ctx.disk
        target = ctx.cfg.data_mount_point
        candidates = ctx.cfg.disk_candidates

        source = disk.mounted_source(target)
        if source is not None and _from_candidates(source, candidates):
            logger.info("Data disk %s already mounted at %s; finishing setup", source, target)
            self._finish(ctx, source, target)
            return

        device = disk.find_unmounted_block_device(candidates)
        if device is None:
            logger.warning(
                "No suitable data disk found; skipping disk setup. Available disks:\n%s",
                disk.list_block_devices(),
            )
            ctx.warn(step=self.name, reason="no_data_disk")
            return
        logger.info("Found data disk at %s", device)

        if source is not None:
            logger.warning("A filesystem is already mounted at %s.\n%s", target, disk.usage(target))
            ctx.warn(step=self.name, reason="mount_point_busy", mount_point=target)
            return

        partition = disk.partition(device)
        if not disk.wait_for_partition(partition, timeout=ctx.cfg.partition_wait_seconds):
            logger.error(
                "Partition %s not found after creation. Available block devices:\n%s",
                partition,
                disk.list_block_devices(),
            )
            ctx.warn(step=self.name, reason="partition_missing", partition=partition)
            return

        disk.format_filesystem(partition)
        disk.mount(partition, target)
        self._finish(ctx, partition, target)

    def _finish(self, ctx: SetupCtx, partition: str, target: str) -> None:
        if ctx.disk.persist_mount_entry(partition, target):
            logger.info("Added entry to fstab for automatic mounting at boot.")
        ctx.disk.chown(target, ctx.user)
        logger.info("Data disk mounted at %s\n%s", target, ctx.disk.usage(target))
