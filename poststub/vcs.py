"""Publishing new posts through git.

Runs the same three commands the blog is published with by hand:
`git add -A`, `git commit -m <message>` and `git push`. The site itself is
built and deployed by CI once the push lands.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from .stub import InvalidInput, PostStubError


class PublishError(PostStubError):
    """A git step failed.

    Attributes:
        step: Name of the step that failed (add, commit, push).
        message: Output or error text from git.
    """

    def __init__(self, step: str, message: str):
        self.step = step
        self.message = message
        super().__init__(f"git {step} failed: {message}")


def publish_steps(
    message: str, remote: str | None = None, branch: str | None = None
) -> list[tuple[str, list[str]]]:
    """Return the git steps to run, as (name, arguments) pairs."""
    push = ["push"]
    if remote:
        push.append(remote)
        if branch:
            push.append(branch)
    return [
        ("add", ["add", "-A"]),
        ("commit", ["commit", "-m", message]),
        ("push", push),
    ]


def publish(
    project_root: Path,
    message: str | None,
    remote: str | None = None,
    branch: str | None = None,
) -> list[str]:
    """Stage, commit and push every change in the project.

    Args:
        project_root: Working tree to run git in.
        message: Commit message.
        remote: Optional remote to push to.
        branch: Optional branch to push, used only with a remote.

    Returns:
        Names of the steps that ran.

    Raises:
        InvalidInput: If the commit message is empty.
        PublishError: If git is missing or a step exits non-zero. Later
            steps are not run.
    """
    message = (message or "").strip()
    if not message:
        raise InvalidInput("Commit message cannot be empty")

    git_bin = shutil.which("git")
    if not git_bin:
        raise PublishError("add", "git executable not found on PATH")

    completed = []
    for step, args in publish_steps(message, remote, branch):
        try:
            subprocess.run(
                [git_bin, *args],
                cwd=project_root,
                check=True,
                capture_output=True,
                text=True,
            )
        except subprocess.CalledProcessError as exc:
            output = (exc.stderr or exc.stdout or "").strip()
            raise PublishError(step, output or f"exit status {exc.returncode}") from exc
        except OSError as exc:
            raise PublishError(step, str(exc)) from exc
        completed.append(step)
    return completed
