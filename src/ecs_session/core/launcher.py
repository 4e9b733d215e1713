"""Launch an interactive `aws ecs execute-command` session."""

import logging
import re
import shutil
import signal
import subprocess  # nosec B404
import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from ecs_session.core.errors import ExecuteCommandNotEnabledError, LaunchError

logger = logging.getLogger(__name__)

NOT_ENABLED_PATTERN = re.compile(r"(is|was) not enabled", re.IGNORECASE)


def build_execute_command(
    aws_cli: str,
    region: str,
    cluster: str,
    task_arn: str,
    container: str,
    command: str,
    profile: str | None = None,
) -> list[str]:
    """Return the argument list for an execute-command session.

    Args:
        aws_cli: Path of the AWS CLI executable.
        region: AWS region of the cluster.
        cluster: Cluster name.
        task_arn: Full task ARN.
        container: Container name within the task.
        command: Command to run inside the container.
        profile: Optional AWS named profile.

    Returns:
        The command line to execute.
    """
    args = [aws_cli, "ecs", "execute-command"]
    # fmt: off
    args += [
        "--cluster", cluster,
        "--task", task_arn,
        "--container", container,
        "--interactive",
        "--command", command,
        "--region", region,
    ]
    # fmt: on
    if profile:
        args += ["--profile", profile]
    return args


class SessionLauncher:
    """Runs execute-command attached to the operator's terminal."""

    def __init__(self, aws_cli: str = "aws", profile: str | None = None) -> None:
        self.aws_cli = aws_cli
        self.profile = profile

    def launch(
        self,
        region: str,
        cluster: str,
        task_arn: str,
        container: str,
        command: str,
    ) -> None:
        """Run the session and block until the operator ends it.

        Standard input and output are inherited. Standard error is echoed to
        the terminal and kept so that a disabled execute-command can be told
        apart from other failures. Ctrl-C goes to the remote shell, not to
        this process, until the session exits.

        Raises:
            ExecuteCommandNotEnabledError: If the target has execute-command disabled.
            LaunchError: If the session cannot be started or exits with an error.
        """
        executable = shutil.which(self.aws_cli)
        if executable is None:
            raise LaunchError(f"AWS CLI executable '{self.aws_cli}' was not found on PATH.")

        args = build_execute_command(
            executable, region, cluster, task_arn, container, command, self.profile
        )
        logger.debug("Running: %s", args)

        captured: list[str] = []
        try:
            with (
                _interrupts_ignored(),
                subprocess.Popen(args, stderr=subprocess.PIPE, text=True) as process,  # nosec B603
            ):
                if process.stderr is not None:
                    for line in process.stderr:
                        sys.stderr.write(line)
                        sys.stderr.flush()
                        captured.append(line)
                returncode = process.wait()
        except OSError as exc:
            raise LaunchError(f"Failed to start execute-command session: {exc}") from exc

        if returncode == 0:
            return

        output = "".join(captured).strip()
        detail = output or f"exit status {returncode}"
        if NOT_ENABLED_PATTERN.search(output):
            raise ExecuteCommandNotEnabledError(
                f"Service does not have execute-command enabled: {detail}"
            )
        raise LaunchError(f"Failed to start execute-command session: {detail}")


@contextmanager
def _interrupts_ignored() -> Iterator[None]:
    """Ignore SIGINT in this process while the session owns the terminal.

    Ctrl-C belongs to the remote shell; the AWS CLI ignores it the same way.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return
    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)
