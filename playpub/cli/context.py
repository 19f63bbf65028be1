from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from playpub.core.config import CONFIG_FILE_NAME, PublishSettings, load_config, load_config_or_default
from playpub.core.errors import ErrorCode
from playpub.core.result import Err
from playpub.output.console import ConsoleProtocol, RichConsole, Style

WORKSPACE_ENV = "PLAYPUB_WORKSPACE"


@dataclass(frozen=True, slots=True)
class CLIContext:
    workspace_root: Path
    settings: PublishSettings
    console: ConsoleProtocol


def detect_workspace_root() -> Path:
    """The --workspace option, else $PLAYPUB_WORKSPACE, else the current directory."""
    env = os.environ.get(WORKSPACE_ENV)
    if env:
        return Path(env).expanduser().resolve()
    return Path.cwd().resolve()


def build_context(config_path: Path | None = None) -> CLIContext:
    console = RichConsole()
    root = detect_workspace_root()

    # An explicit --config must exist; the default file is optional.
    if config_path is not None:
        path = config_path if config_path.is_absolute() else root / config_path
        result = load_config(path)
    else:
        result = load_config_or_default(root / CONFIG_FILE_NAME)

    if isinstance(result, Err):
        error = result.error
        console.error(error.message)
        if error.hint:
            console.print(f"hint: {error.hint}", Style.DIM)
        code = ErrorCode.IO_ERROR if error.kind == "io" else ErrorCode.CONFIG_ERROR
        raise typer.Exit(code=int(code))

    return CLIContext(workspace_root=root, settings=result.value, console=console)
