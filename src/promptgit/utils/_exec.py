"""Run an external program and fold every outcome into a result record.

Only the git binary is run this way. Spawn failures and timeouts never
raise; the caller inspects CommandResult and picks its own fallback.
"""

import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

DEFAULT_TIMEOUT_MS: Final = 5000

# Porcelain status of a huge dirty tree is the only output that gets this big
MAX_OUTPUT_BYTES: Final = 100 * 1024

TRUNCATION_MARKER: Final = "\n... [output truncated]"


@dataclass(frozen=True, slots=True)
class CommandConfig:
    """What to run and how.

    Attributes:
        args: Program followed by its arguments. Never passed to a shell.
        cwd: Working directory, or None for the current one.
        env: Variables layered over ``os.environ``.
        timeout_ms: Wall-clock limit in milliseconds.
    """

    args: tuple[str, ...] = ()
    cwd: str | Path | None = None
    env: dict[str, str] = field(default_factory=dict)
    timeout_ms: int = DEFAULT_TIMEOUT_MS


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of one run.

    ``success`` means the process was started and finished in time; a
    non-zero ``exit_code`` still counts as success. ``error`` explains why
    ``success`` is False.
    """

    success: bool
    exit_code: int | None = None
    stdout: str = ""
    stderr: str = ""
    error: str | None = None
    timed_out: bool = False
    command_not_found: bool = False

    @property
    def ok(self) -> bool:
        """Whether the process finished with exit status 0."""
        return self.success and self.exit_code == 0


def truncate_output(output: str, max_bytes: int = MAX_OUTPUT_BYTES) -> str:
    """Cut ``output`` to at most ``max_bytes`` of UTF-8 and mark the cut.

    A multi-byte character split by the cut is dropped.
    """
    encoded = output.encode("utf-8")
    if len(encoded) <= max_bytes:
        return output
    head = encoded[:max_bytes].decode("utf-8", errors="ignore")
    return head + TRUNCATION_MARKER


def _decode(raw: bytes) -> str:
    return truncate_output(raw.decode("utf-8", errors="replace"))


def run_command(config: CommandConfig) -> CommandResult:
    """Run ``config.args`` with stdin closed and both streams captured.

    Args:
        config: Program, working directory, environment overlay, and timeout.

    Returns:
        The result. Output is decoded as UTF-8 with replacement and capped
        at MAX_OUTPUT_BYTES per stream.
    """
    if not config.args:
        return CommandResult(success=False, error="No command specified")

    timeout_seconds = config.timeout_ms / 1000.0
    try:
        completed = subprocess.run(  # noqa: S603
            list(config.args),
            cwd=str(config.cwd) if config.cwd else None,
            env={**os.environ, **config.env},
            stdin=subprocess.DEVNULL,
            capture_output=True,
            timeout=timeout_seconds,
            check=False,
        )
    except subprocess.TimeoutExpired:
        return CommandResult(
            success=False,
            error=f"Command timed out after {timeout_seconds}s",
            timed_out=True,
        )
    except FileNotFoundError as e:
        return CommandResult(success=False, error=str(e), command_not_found=True)
    except OSError as e:
        return CommandResult(success=False, error=str(e))

    return CommandResult(
        success=True,
        exit_code=completed.returncode,
        stdout=_decode(completed.stdout),
        stderr=_decode(completed.stderr),
    )
