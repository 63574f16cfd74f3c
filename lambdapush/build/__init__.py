"""Compiler invoker: cross-compiles a Go function for Lambda.

Public API:
    compile_function(source_dir, architecture, go_binary) -> BuildArtifact
    build_command(source_dir, go_binary) -> list[str]
    build_env(architecture, base) -> dict
"""

from lambdapush.build.compiler import build_command, build_env, compile_function
from lambdapush.build.types import BuildArtifact, CompileResult

__all__ = [
    "compile_function",
    "build_command",
    "build_env",
    "BuildArtifact",
    "CompileResult",
]
