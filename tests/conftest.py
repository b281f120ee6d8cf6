"""
Pytest configuration and fixtures for kubeflow-setup tests.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Set

import pytest

from kubeflow_setup.context import SetupCtx
from kubeflow_setup.lib.microk8s import StatusReport
from kubeflow_setup.setup_config import SetupConfig
from kubeflow_setup.state_store import MemoryMarkerStore


# ============================================================================
# Fake collaborators
# ============================================================================


class FakeSnap:
    def __init__(self, installed: Iterable[str] = ()):
        self.installed = set(installed)
        self.calls: List[tuple] = []

    def is_installed(self, name: str) -> bool:
        return name in self.installed

    def install(self, name: str, *, channel: str, classic: bool = False) -> None:
        self.calls.append(("install", name, channel, classic))
        self.installed.add(name)


class FakeGroups:
    def __init__(self, member: bool = True):
        self.member = member
        self.calls: List[tuple] = []

    def current_user_in_group(self, name: str) -> bool:
        return self.member

    def add_user_to_group(self, user: str, name: str) -> None:
        self.calls.append(("add", user, name))

    def ensure_owned_dir(self, path: str, user: str) -> None:
        self.calls.append(("dir", path, user))


class FakeMicroK8s:
    def __init__(self, running: bool = True):
        self.running = running
        self.calls: List[tuple] = []

    def wait_ready(self, timeout: Optional[int] = None) -> None:
        self.calls.append(("wait_ready", timeout))

    def enable_addons(self, addons: Sequence[str]) -> None:
        self.calls.append(("enable", list(addons)))

    def status(self) -> StatusReport:
        self.calls.append(("status",))
        return StatusReport(running=self.running, text="microk8s is running" if self.running else "not running")

    def config(self) -> str:
        return "apiVersion: v1\n"


class FakeJuju:
    def __init__(self):
        self.clouds: Set[str] = set()
        self.controllers: Set[str] = set()
        self.models: Set[str] = set()
        self.apps: Set[str] = set()
        self.calls: List[tuple] = []

    def cloud_registered(self, name: str) -> bool:
        return name in self.clouds

    def register_cloud(self, name: str, kubeconfig: str) -> None:
        self.calls.append(("add-k8s", name, kubeconfig))
        self.clouds.add(name)

    def controller_exists(self, name: str) -> bool:
        return name in self.controllers

    def bootstrap_controller(self, cloud: str, name: str) -> None:
        self.calls.append(("bootstrap", cloud, name))
        self.controllers.add(name)

    def model_exists(self, name: str) -> bool:
        return name in self.models

    def create_model(self, name: str) -> None:
        self.calls.append(("add-model", name))
        self.models.add(name)

    def deployed_apps(self) -> Set[str]:
        return set(self.apps)

    def deploy(self, app: str, *, channel: str, trust: bool = False) -> None:
        self.calls.append(("deploy", app, channel, trust))
        self.apps.add("kubeflow-dashboard")


class FakeKernel:
    def __init__(self):
        self.set: List[tuple] = []
        self.persisted: List[tuple] = []

    def set_param(self, key: str, value: str) -> None:
        self.set.append((key, value))

    def persist_param(self, key: str, value: str) -> bool:
        if (key, value) in self.persisted:
            return False
        self.persisted.append((key, value))
        return True


class FakeDisk:
    def __init__(self, device: Optional[str] = None, mounted_at: Optional[str] = None, partition_appears: bool = True):
        self.device = device
        self.mounted_at = mounted_at
        self.partition_appears = partition_appears
        self.calls: List[tuple] = []

    def find_unmounted_block_device(self, candidates: Iterable[str]) -> Optional[str]:
        self.calls.append(("find", list(candidates)))
        return self.device

    def mounted_source(self, target: str) -> Optional[str]:
        return self.mounted_at

    def partition(self, device: str) -> str:
        self.calls.append(("partition", device))
        return device + "1"

    def wait_for_partition(self, partition: str, timeout: float = 5.0) -> bool:
        return self.partition_appears

    def format_filesystem(self, partition: str) -> None:
        self.calls.append(("mkfs", partition))

    def mount(self, partition: str, target: str) -> None:
        self.calls.append(("mount", partition, target))

    def persist_mount_entry(self, partition: str, target: str) -> bool:
        self.calls.append(("fstab", partition, target))
        return True

    def chown(self, target: str, user: str) -> None:
        self.calls.append(("chown", target, user))

    def usage(self, target: str) -> str:
        return ""

    def list_block_devices(self) -> str:
        return "NAME MAJ:MIN\nsda 8:0"


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def cfg() -> SetupConfig:
    return SetupConfig()


@pytest.fixture
def ctx(cfg: SetupConfig) -> SetupCtx:
    return SetupCtx(
        cfg=cfg,
        user="ubuntu",
        snap=FakeSnap(),
        groups=FakeGroups(),
        microk8s=FakeMicroK8s(),
        juju=FakeJuju(),
        kernel=FakeKernel(),
        disk=FakeDisk(),
    )


@pytest.fixture
def memory_store() -> MemoryMarkerStore:
    return MemoryMarkerStore()
