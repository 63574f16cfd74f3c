"""Pipeline orchestrator: compile -> package -> upload -> update -> clean up.

Public API:
    run_pipeline(target, clients, settings, reporter) -> PipelineResult
    remove_artifact(path) -> bool
    PipelineResult, PipelineStage
"""

from lambdapush.pipeline.cleanup import remove_artifact
from lambdapush.pipeline.orchestrator import run_pipeline
from lambdapush.pipeline.types import PipelineResult, PipelineStage, Reporter

__all__ = [
    "run_pipeline",
    "remove_artifact",
    "PipelineResult",
    "PipelineStage",
    "Reporter",
]
