from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .context import SetupCtx, build_ctx
from .errors import StaleStateError
from .logging_utils import configure_logging
from .pipeline import RunResult, RunStatus, Step, resume_index, run_sequence
from .setup_config import SetupConfig, load_setup_config
from .state_store import SENTINEL, FileMarkerStore, MarkerStore, MemoryMarkerStore
from .steps import (
    AddK8sCloudStep,
    BootstrapControllerStep,
    ConfigureSystemStep,
    ConfigureUserStep,
    CreateModelStep,
    DeployKubeflowStep,
    EnableAddonsStep,
    InstallJujuStep,
    InstallMicroK8sStep,
    SetupDataDiskStep,
    VerifyMicroK8sStep,
    WaitMicroK8sReadyStep,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_STALE = 2


def build_steps() -> list[Step]:
    return [
        InstallMicroK8sStep(),
        ConfigureUserStep(),
        WaitMicroK8sReadyStep(),
        EnableAddonsStep(),
        VerifyMicroK8sStep(),
        InstallJujuStep(),
        AddK8sCloudStep(),
        BootstrapControllerStep(),
        CreateModelStep(),
        ConfigureSystemStep(),
        DeployKubeflowStep(),
        SetupDataDiskStep(),
    ]


def dashboard_instructions(cfg: SetupConfig) -> str:
    port = cfg.kubeflow_dashboard_port
    return "\n".join(
        [
            "=== Kubeflow setup completed! ===",
            "You can access the Kubeflow dashboard by port-forwarding:",
            f"  microk8s kubectl port-forward -n kubeflow service/istio-ingressgateway {port}:80 --address 0.0.0.0",
            f"Then visit http://YOUR_VM_IP:{port}",
        ]
    )


def run(
    *,
    cfg: SetupConfig,
    store: MarkerStore,
    ctx: Optional[SetupCtx] = None,
    steps: Optional[Sequence[Step]] = None,
    dry_run: bool = False,
) -> RunResult:
    """Run the setup sequence against a marker store.

    Raises StaleStateError if the stored marker is not a known step.
    """

    if ctx is None:
        ctx = build_ctx(cfg, dry_run=dry_run)
    if steps is None:
        steps = build_steps()

    logger.info("=== Setting up Kubeflow on this VM ===")
    result = run_sequence(steps, store, ctx)

    for w in ctx.warnings:
        logger.warning("Warning recorded: %s", w)
    return result


def _status_report(store: MarkerStore, steps: Sequence[Step]) -> str:
    names = [s.name for s in steps]
    marker = store.load() or SENTINEL
    lines = [f"Last completed step: {marker}"]
    start = resume_index(names, marker)
    if start >= len(names):
        lines.append("All steps completed.")
    else:
        lines.append("Remaining steps:")
        lines.extend(f"  {n}" for n in names[start:])
    return "\n".join(lines)


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="kubeflow-setup",
        description="Resumable MicroK8s + Juju + Kubeflow setup for a single VM.",
    )
    p.add_argument("--config", default=None, help="Path to setup config (yaml)")
    p.add_argument("--progress-file", default=None, help="Path to the progress marker file")
    p.add_argument("--log", default=None, help="Path to setup log")
    p.add_argument("--dry-run", action="store_true", help="Log commands without running them or saving progress")
    p.add_argument("--verbose", "-v", action="store_true", help="Log command output")
    actions = p.add_mutually_exclusive_group()
    actions.add_argument("--status", action="store_true", help="Show progress and remaining steps")
    actions.add_argument("--list-steps", action="store_true", help="List step names in order")
    actions.add_argument("--reset", action="store_true", help="Delete the progress file and exit")

    args = p.parse_args(argv)

    cfg = load_setup_config(args.config)
    configure_logging(
        log_path=args.log or cfg.log_path,
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    file_store = FileMarkerStore(args.progress_file or cfg.progress_file)
    steps = build_steps()

    if args.list_steps:
        for s in steps:
            print(s.name)
        return EXIT_OK

    if args.reset:
        if file_store.reset():
            print(f"Progress reset ({file_store.path} removed).")
        else:
            print(f"No progress file at {file_store.path}.")
        return EXIT_OK

    try:
        if args.status:
            print(_status_report(file_store, steps))
            return EXIT_OK

        store: MarkerStore = file_store
        if args.dry_run:
            store = MemoryMarkerStore(file_store.load())
        result = run(cfg=cfg, store=store, steps=steps, dry_run=args.dry_run)
    except StaleStateError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(f"Fix or delete {file_store.path} (kubeflow-setup --reset) and run again.", file=sys.stderr)
        return EXIT_STALE

    if result.status is RunStatus.FAILED:
        print(f"Error: step {result.step} failed: {result.error}", file=sys.stderr)
        print("Fix the problem and run this command again to retry the step.", file=sys.stderr)
        return EXIT_FAILED

    if result.status is RunStatus.PAUSED:
        print(result.message)
        return EXIT_OK

    print(dashboard_instructions(cfg))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
