"""Shared fixtures for the lambdapush test suite.

No real Go toolchain or AWS account is touched: subprocess.run is patched
with a fake compiler that writes a binary to the -o path, and the S3 and
Lambda clients are MagicMocks.
"""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from lambdapush.core.config import Settings
from lambdapush.deploy.session import AwsClients
from lambdapush.target.types import Architecture, DeploymentTarget

FAKE_BINARY = b"\x7fELF\x02\x01\x01" + b"\x00" * 64 + b"fake go binary"

MAIN_GO = """\
package main

import "github.com/aws/aws-lambda-go/lambda"

func handler() (string, error) { return "ok", nil }

func main() { lambda.Start(handler) }
"""


def make_client_error(code: str, message: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


def write_go_script(directory: Path, body: str) -> Path:
    """Write an executable shell script standing in for the go binary.

    Receives the real argv: build -trimpath -o <out> <main.go>, so $4 is
    the output path.
    """
    script = directory / "fake-go"
    script.write_text("#!/bin/sh\n" + body, encoding="utf-8")
    script.chmod(0o755)
    return script


def fake_compiler(binary: bytes = FAKE_BINARY, returncode: int = 0, output: str = ""):
    """Return a subprocess.run side effect that mimics `go build -o <path>`."""

    def _run(command, **kwargs):
        if returncode == 0:
            out_path = Path(command[command.index("-o") + 1])
            out_path.write_bytes(binary)
        return subprocess.CompletedProcess(command, returncode, stdout=output)

    return _run


@pytest.fixture
def function_dir(tmp_path: Path) -> Path:
    source = tmp_path / "fn"
    source.mkdir()
    (source / "main.go").write_text(MAIN_GO, encoding="utf-8")
    return source


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        aws_default_region="",
        go_binary="go",
        verify_upload=False,
        debug=False,
    )


@pytest.fixture
def target(function_dir: Path) -> DeploymentTarget:
    return DeploymentTarget(
        source_dir=function_dir,
        function_name="fn1",
        bucket="b1",
        region="us-east-1",
        architecture=Architecture.X86_64,
    )


@pytest.fixture
def aws_clients() -> AwsClients:
    s3 = MagicMock()
    s3.put_object.return_value = {"ETag": '"abc123"'}
    lambda_ = MagicMock()
    lambda_.update_function_code.side_effect = lambda **kwargs: {
        "FunctionName": kwargs["FunctionName"],
        "Architectures": kwargs["Architectures"],
        "CodeSha256": "c2hhMjU2",
        "LastUpdateStatus": "InProgress",
        "RevisionId": "rev-1",
    }
    return AwsClients(s3=s3, lambda_=lambda_)


@pytest.fixture
def mock_go():
    """Patch subprocess.run in the compiler with a successful fake build."""
    with patch("lambdapush.build.compiler.subprocess.run") as mock_run:
        mock_run.side_effect = fake_compiler()
        yield mock_run
