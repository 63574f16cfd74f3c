"""Cross-compile a Go function into a static Linux binary.

Runs `go build -trimpath -o <src>/main <src>/main.go` with:
  GOOS=linux        — Lambda's OS
  GOARCH=amd64|arm64 — from the architecture selector
  CGO_ENABLED=0     — no libc dependency in the output
-trimpath strips build paths from the binary so output is reproducible.

There is no timeout; a build can only be cancelled by killing the process.
"""

import logging
import os
import subprocess
import time
from pathlib import Path
from typing import Mapping, Optional

from lambdapush.build.types import BuildArtifact, CompileResult
from lambdapush.errors import BuildError, ConfigurationError
from lambdapush.target.types import ARTIFACT_NAME, Architecture

logger = logging.getLogger(__name__)

DEFAULT_GO_BINARY = "go"
TARGET_GOOS = "linux"
ENTRYPOINT_SOURCE = "main.go"


def build_command(source_dir: Path, go_binary: str = DEFAULT_GO_BINARY) -> list[str]:
    """Return the argv for compiling the function in source_dir."""
    source_dir = Path(source_dir)
    return [
        go_binary,
        "build",
        "-trimpath",
        "-o",
        str(source_dir / ARTIFACT_NAME),
        str(source_dir / ENTRYPOINT_SOURCE),
    ]


def build_env(
    architecture: Architecture,
    base: Optional[Mapping[str, str]] = None,
) -> dict:
    """Return the compile environment: base env plus the cross-compile overrides."""
    env = dict(os.environ if base is None else base)
    env["GOOS"] = TARGET_GOOS
    # Go 1.19+ may enable cgo by default; Lambda needs a static binary.
    env["CGO_ENABLED"] = "0"
    env["GOARCH"] = architecture.goarch
    return env


def _run_compiler(command: list[str], cwd: Path, env: dict) -> CompileResult:
    start = time.monotonic()
    try:
        completed = subprocess.run(
            command,
            cwd=str(cwd),
            env=env,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            # Compiler output may quote arbitrary bytes from source or paths;
            # undecodable bytes are kept as \xNN escapes rather than lost.
            encoding="utf-8",
            errors="backslashreplace",
        )
    except OSError as exc:
        raise BuildError(
            f"Cannot run compiler '{command[0]}': {exc}",
            CompileResult(
                command=command,
                exit_code=-1,
                duration_seconds=time.monotonic() - start,
                output=str(exc),
            ),
        ) from exc

    return CompileResult(
        command=command,
        exit_code=completed.returncode,
        duration_seconds=time.monotonic() - start,
        output=completed.stdout or "",
    )


def compile_function(
    source_dir: Path,
    architecture: Architecture = Architecture.X86_64,
    go_binary: str = DEFAULT_GO_BINARY,
) -> BuildArtifact:
    """Compile source_dir/main.go into source_dir/main for Lambda.

    Raises:
        ConfigurationError: source_dir does not exist (checked before spawning).
        BuildError: the compiler exited non-zero, could not be started, or
            exited zero without writing the binary. The message carries the
            exit status and the full compiler output.
    """
    source_dir = Path(source_dir)
    if not source_dir.is_dir():
        raise ConfigurationError(f"Function path {source_dir} does not exist")

    command = build_command(source_dir, go_binary)
    env = build_env(architecture)
    logger.info(
        "Compiling %s (GOOS=%s GOARCH=%s)",
        source_dir, env["GOOS"], env["GOARCH"],
    )

    result = _run_compiler(command, source_dir, env)
    logger.info(
        "Compiler exited %d in %.1fs", result.exit_code, result.duration_seconds,
    )

    if not result.is_success:
        raise BuildError(
            f"go build failed with exit status {result.exit_code}\n{result.output}",
            result,
        )

    artifact_path = source_dir / ARTIFACT_NAME
    if not artifact_path.is_file():
        raise BuildError(
            f"go build exited 0 but produced no binary at {artifact_path}\n{result.output}",
            result,
        )

    return BuildArtifact(
        path=artifact_path,
        architecture=architecture,
        compile_result=result,
    )
