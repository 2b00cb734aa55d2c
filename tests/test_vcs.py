import subprocess

import pytest

from poststub.stub import InvalidInput
from poststub.vcs import PublishError, publish, publish_steps


def test_publish_steps():
    steps = publish_steps("msg")
    assert steps == [
        ("add", ["add", "-A"]),
        ("commit", ["commit", "-m", "msg"]),
        ("push", ["push"]),
    ]
    assert publish_steps("msg", "origin")[-1] == ("push", ["push", "origin"])
    assert publish_steps("msg", "origin", "main")[-1] == ("push", ["push", "origin", "main"])
    # branch alone is ignored
    assert publish_steps("msg", None, "main")[-1] == ("push", ["push"])


def test_publish_runs_steps_in_order(monkeypatch, tmp_path):
    calls = []
    monkeypatch.setattr("poststub.vcs.shutil.which", lambda cmd: "/usr/bin/git")

    def fake_run(cmd, cwd=None, check=None, capture_output=None, text=None):
        calls.append((cmd, cwd))
        return subprocess.CompletedProcess(cmd, 0, "", "")

    monkeypatch.setattr("poststub.vcs.subprocess.run", fake_run)
    assert publish(tmp_path, "  add post  ") == ["add", "commit", "push"]
    assert [c[0][1] for c in calls] == ["add", "commit", "push"]
    assert calls[1][0] == ["/usr/bin/git", "commit", "-m", "add post"]
    assert all(cwd == tmp_path for _, cwd in calls)


def test_publish_stops_at_first_failure(monkeypatch, tmp_path):
    calls = []
    monkeypatch.setattr("poststub.vcs.shutil.which", lambda cmd: "/usr/bin/git")

    def fake_run(cmd, cwd=None, check=None, capture_output=None, text=None):
        calls.append(cmd[1])
        if cmd[1] == "commit":
            raise subprocess.CalledProcessError(1, cmd, output="nothing to commit", stderr="")
        return subprocess.CompletedProcess(cmd, 0, "", "")

    monkeypatch.setattr("poststub.vcs.subprocess.run", fake_run)
    with pytest.raises(PublishError) as excinfo:
        publish(tmp_path, "msg")
    assert excinfo.value.step == "commit"
    assert excinfo.value.message == "nothing to commit"
    assert calls == ["add", "commit"]


def test_publish_without_git(monkeypatch, tmp_path):
    monkeypatch.setattr("poststub.vcs.shutil.which", lambda cmd: None)
    with pytest.raises(PublishError) as excinfo:
        publish(tmp_path, "msg")
    assert "not found" in excinfo.value.message


def test_publish_empty_message(tmp_path):
    with pytest.raises(InvalidInput):
        publish(tmp_path, "   ")
