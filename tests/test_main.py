"""
Tests for the kubeflow-setup command line entry point.
"""

import pytest

from kubeflow_setup import main as cli
from kubeflow_setup.state_store import FileMarkerStore

from conftest import FakeGroups


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: "unused.log")


@pytest.fixture
def progress(tmp_path):
    return tmp_path / "progress"


@pytest.fixture
def fake_ctx(monkeypatch, ctx):
    monkeypatch.setattr(cli, "build_ctx", lambda cfg, dry_run=False: ctx)
    return ctx


def test_completed_run_prints_dashboard(fake_ctx, progress, capsys):
    rc = cli.main(["--progress-file", str(progress)])

    out = capsys.readouterr().out
    assert rc == 0
    assert "port-forward -n kubeflow service/istio-ingressgateway 8080:80" in out
    assert progress.read_text() == "completed\n"


def test_pause_exits_zero_with_instructions(fake_ctx, progress, capsys):
    fake_ctx.groups = FakeGroups(member=False)

    rc = cli.main(["--progress-file", str(progress)])

    assert rc == 0
    assert "run this command again" in capsys.readouterr().out
    assert progress.read_text() == "microk8s_installed\n"


def test_failure_exits_nonzero_with_step_on_stderr(fake_ctx, progress, capsys):
    from conftest import FakeMicroK8s

    fake_ctx.microk8s = FakeMicroK8s(running=False)

    rc = cli.main(["--progress-file", str(progress)])

    err = capsys.readouterr().err
    assert rc == cli.EXIT_FAILED
    assert "microk8s_verified" in err
    assert "not running" in err
    assert progress.read_text() == "addons_enabled\n"


def test_stale_marker(fake_ctx, progress, capsys):
    progress.write_text("no_such_step\n")

    rc = cli.main(["--progress-file", str(progress)])

    assert rc == cli.EXIT_STALE
    assert "no_such_step" in capsys.readouterr().err
    assert fake_ctx.snap.calls == []


def test_status(progress, capsys):
    FileMarkerStore(progress).save("kubeflow_deployed")

    rc = cli.main(["--progress-file", str(progress), "--status"])

    out = capsys.readouterr().out
    assert rc == 0
    assert "Last completed step: kubeflow_deployed" in out
    assert out.rstrip().endswith("completed")


def test_list_steps(capsys):
    rc = cli.main(["--list-steps"])

    lines = capsys.readouterr().out.split()
    assert rc == 0
    assert lines[0] == "microk8s_installed"
    assert len(lines) == 12


def test_reset(progress, capsys):
    FileMarkerStore(progress).save("juju_installed")

    assert cli.main(["--progress-file", str(progress), "--reset"]) == 0
    assert not progress.exists()
    assert cli.main(["--progress-file", str(progress), "--reset"]) == 0
    assert "No progress file" in capsys.readouterr().out


def test_dry_run_leaves_progress_untouched(progress, monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    FileMarkerStore(progress).save("model_created")

    rc = cli.main(["--progress-file", str(progress), "--dry-run"])

    assert rc == 0
    assert progress.read_text() == "model_created\n"


def test_config_file_overrides(fake_ctx, tmp_path, capsys):
    cfg = tmp_path / "setup.yaml"
    progress = tmp_path / "from-config"
    cfg.write_text(f"progress_file: {progress}\nkubeflow:\n  dashboard_port: 9090\n")

    rc = cli.main(["--config", str(cfg)])

    assert rc == 0
    assert progress.read_text() == "completed\n"
    assert "http://YOUR_VM_IP:9090" in capsys.readouterr().out
