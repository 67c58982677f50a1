"""Environment resolution orchestration.

This module chains locate -> parse -> project so that every entry point
(`print`, `session`, tests) resolves environments the same way. The CLI only
decides what to do with the result and how to present errors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from adapters.config_locator import current_dir, locate
from adapters.config_parser import parse
from adapters.session_launcher import launch
from adapters.shell_emitter import emit
from core.config import AppSettings
from core.domain.models import (
    ConfigFile,
    ConfigReference,
    EnvironmentSnapshot,
    ResolvedEnvironment,
)
from core.domain.shell import ShellDialect
from core.services.projector import project

logger = logging.getLogger(__name__)


@dataclass
class EnvironmentRequest:
    """Parameters for one invocation."""

    reference: ConfigReference = field(default_factory=ConfigReference)
    start_dir: Path = field(default_factory=current_dir)
    snapshot: EnvironmentSnapshot = field(default_factory=EnvironmentSnapshot)
    shell_override: str | None = None

    @property
    def shell_path(self) -> str | None:
        return self.shell_override or self.snapshot.shell_path


@dataclass
class PipelineResult:
    """Output of the resolution pipeline."""

    config: ConfigFile
    environment: ResolvedEnvironment


def resolve_environment(*, settings: AppSettings, request: EnvironmentRequest) -> PipelineResult:
    config = locate(
        request.reference,
        request.start_dir,
        config_dir=settings.config_dir,
        implicit_name=settings.implicit_filename,
    )
    variables = parse(config.contents, source=config.path)
    environment = project(variables, request.snapshot)
    logger.debug("resolved %d assignments from %s", len(environment.assignments), config.path)
    return PipelineResult(config=config, environment=environment)


def render_exports(*, settings: AppSettings, request: EnvironmentRequest) -> str:
    """`print` mode: export statements for the detected dialect."""

    result = resolve_environment(settings=settings, request=request)
    dialect = ShellDialect.detect(request.shell_path)
    logger.debug("emitting for %s", dialect.label())
    return emit(result.environment, dialect)


def run_session(*, settings: AppSettings, request: EnvironmentRequest) -> int:
    """`session` mode: spawn the shell and return its exit status."""

    result = resolve_environment(settings=settings, request=request)
    return launch(result.environment, request.shell_path)
