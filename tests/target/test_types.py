"""Tests for Architecture and DeploymentTarget."""

from pathlib import Path

import pytest

from lambdapush.target.types import Architecture, DeploymentTarget, object_key_for


class TestArchitecture:
    @pytest.mark.parametrize(
        "arm, goarch, entry, lambda_name",
        [
            (False, "amd64", "main", "x86_64"),
            (True, "arm64", "bootstrap", "arm64"),
        ],
    )
    def test_values_derive_from_one_selector(self, arm, goarch, entry, lambda_name):
        arch = Architecture.from_flag(arm)
        assert arch.goarch == goarch
        assert arch.entry_name == entry
        assert arch.lambda_name == lambda_name
        assert arch.is_arm is arm

    def test_default_is_x86_64(self):
        assert DeploymentTarget(Path("/proj/fn"), "fn1", "b1", "us-east-1").architecture is Architecture.X86_64


class TestDeploymentTarget:
    def test_artifact_path_is_main_inside_source(self):
        target = DeploymentTarget(Path("/proj/fn"), "fn1", "b1", "us-east-1")
        assert target.artifact_path == Path("/proj/fn/main")

    def test_object_key_is_name_dot_zip(self):
        target = DeploymentTarget(Path("/proj/fn"), "fn1", "b1", "us-east-1")
        assert target.object_key == "fn1.zip"
        assert object_key_for("fn1") == "fn1.zip"

    def test_is_immutable(self):
        target = DeploymentTarget(Path("/proj/fn"), "fn1", "b1", "us-east-1")
        with pytest.raises(AttributeError):
            target.bucket = "other"  # type: ignore[misc]

    def test_to_dict(self):
        target = DeploymentTarget(Path("/proj/fn"), "fn1", "b1", "us-east-1", Architecture.ARM64)
        assert target.to_dict() == {
            "source_dir": "/proj/fn",
            "function_name": "fn1",
            "bucket": "b1",
            "region": "us-east-1",
            "architecture": "arm64",
            "object_key": "fn1.zip",
        }
