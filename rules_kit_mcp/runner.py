"""External process runner with a hard wall-clock timeout.

Every call resolves to a :class:`ProcessResult`; spawn failures, non-zero
exits and timeouts are all reported through it rather than raised.

The child runs in its own session, so it leads a process group. Whatever
way the call ends (exit, timeout or cancellation of the awaiting task),
the whole group is killed before returning; background jobs the command
started do not outlive it.
"""

from __future__ import annotations

import asyncio
import contextlib
import os
import signal
from collections.abc import Sequence

import structlog

from rules_kit_mcp.models import ProcessResult

log = structlog.get_logger("rules_kit_mcp.runner")

_CHUNK_SIZE = 4096

# How long to wait for pipes to drain once the group is gone.
_DRAIN_GRACE = 2.0

_POLL_INTERVAL = 0.05


def _format_seconds(timeout: float) -> str:
    return f"{timeout:g}"


async def _drain(stream: asyncio.StreamReader | None, sink: list[bytes]) -> None:
    """Append every chunk read from *stream* to *sink* until EOF."""
    if stream is None:
        return
    while True:
        chunk = await stream.read(_CHUNK_SIZE)
        if not chunk:
            return
        sink.append(chunk)


async def _wait_leader(proc: asyncio.subprocess.Process) -> int:
    """Return the exit status of *proc* itself.

    ``proc.wait()`` can also wait for the pipes to close, which a
    backgrounded grandchild may hold open long after the leader exited.
    """
    while proc.returncode is None:
        await asyncio.sleep(_POLL_INTERVAL)
    return proc.returncode


def _terminate(proc: asyncio.subprocess.Process) -> None:
    """SIGKILL the process group led by *proc*.

    The group can outlive its leader, so this runs even after *proc* exited.
    """
    if os.name == "posix":
        with contextlib.suppress(ProcessLookupError, PermissionError):
            os.killpg(proc.pid, signal.SIGKILL)
    if proc.returncode is None:
        with contextlib.suppress(ProcessLookupError):
            proc.kill()


async def _settle(proc: asyncio.subprocess.Process, readers: Sequence[asyncio.Task[None]]) -> None:
    """Give the pipe readers a bounded time to reach EOF, then drop them."""
    _, pending = await asyncio.wait(readers, timeout=_DRAIN_GRACE)
    if pending:
        # Something outside the group still holds the pipes open.
        log.warning("runner.pipes_still_open", pid=proc.pid)
        for task in pending:
            task.cancel()


def _decode(chunks: list[bytes]) -> str:
    return b"".join(chunks).decode("utf-8", errors="replace")


async def run_command(
    argv: Sequence[str],
    timeout: float = 15.0,
    *,
    cwd: str | None = None,
    label: str = "Command",
) -> ProcessResult:
    """Run *argv* and capture its output within *timeout* seconds.

    Success iff the process exits with status zero before the timeout;
    ``error`` carries stderr only on a non-zero exit. On timeout the result
    keeps whatever stdout arrived before the kill.
    """
    if not argv:
        return ProcessResult(success=False, error="No command given")

    try:
        proc = await asyncio.create_subprocess_exec(
            *argv,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=cwd,
            start_new_session=os.name == "posix",
        )
    except OSError as exc:
        log.warning("runner.spawn_failed", command=argv[0], error=str(exc))
        return ProcessResult(success=False, error=str(exc))

    stdout: list[bytes] = []
    stderr: list[bytes] = []
    readers = [
        asyncio.create_task(_drain(proc.stdout, stdout)),
        asyncio.create_task(_drain(proc.stderr, stderr)),
    ]
    leader = asyncio.create_task(_wait_leader(proc))
    settled = False
    try:
        done, _ = await asyncio.wait({leader}, timeout=timeout)
        _terminate(proc)
        await _settle(proc, readers)
        settled = True
    finally:
        if not settled:
            _terminate(proc)
            leader.cancel()
            for task in readers:
                task.cancel()
            log.warning("runner.abandoned", command=argv[0], pid=proc.pid)

    if leader in done:
        returncode = leader.result()
        log.debug("runner.exited", command=argv[0], returncode=returncode)
        return ProcessResult(
            success=returncode == 0,
            output=_decode(stdout),
            error=None if returncode == 0 else _decode(stderr),
        )

    leader.cancel()
    log.warning("runner.timeout", command=argv[0], timeout=timeout, pid=proc.pid)
    return ProcessResult(
        success=False,
        output=_decode(stdout),
        error=f"Timeout: {label} took more than {_format_seconds(timeout)} seconds",
    )


async def run_script(
    script: str, timeout: float = 30.0, *, shell: str = "bash"
) -> ProcessResult:
    """Run a small shell *script* through ``<shell> -c``."""
    return await run_command([shell, "-c", script], timeout, label="Process")


async def probe_available(argv: Sequence[str], timeout: float = 10.0) -> bool:
    """Return True when *argv* exits zero **and** writes something to stdout.

    A zero exit with empty output counts as unavailable; some shims succeed
    without doing any work.
    """
    result = await run_command(argv, timeout)
    available = result.success and bool(result.output)
    log.debug("runner.probe", command=list(argv), available=available)
    return available
