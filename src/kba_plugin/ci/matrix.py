"""
kba_plugin.ci.matrix

CI build matrix generator.

Responsibilities:
- List plugin and app directories of a repository.
- Build the matrix (`php_version`, optional `plugin`, optional `app`) as a pure function.
- Print the matrix as compact JSON; report serialisation failures without failing the job.
"""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel

from kba_plugin.observability.logging import configure_logging, get_logger
from kba_plugin.settings import Settings, get_settings

log = get_logger(__name__)


class BuildMatrix(BaseModel):
    # Field order is the JSON key order.
    php_version: list[str]
    plugin: list[str] | None = None
    app: list[str] | None = None


def list_directories(path: Path) -> list[str]:
    """
    Base names of the non-hidden immediate subdirectories of `path`, sorted.
    A missing directory yields an empty list.
    """

    if not path.is_dir():
        return []
    return sorted(p.name for p in path.iterdir() if p.is_dir() and not p.name.startswith("."))


def build_matrix(
    php_versions: Sequence[str],
    plugins: Sequence[str],
    apps: Sequence[str],
) -> BuildMatrix:
    return BuildMatrix(
        php_version=list(php_versions),
        plugin=list(plugins) or None,
        app=list(apps) or None,
    )


def generate_matrix(
    php_versions: Sequence[str],
    plugin_dir: Path,
    apps_dir: Path,
) -> BuildMatrix:
    return build_matrix(php_versions, list_directories(plugin_dir), list_directories(apps_dir))


def render_matrix(matrix: BuildMatrix) -> str:
    return matrix.model_dump_json(exclude_none=True)


def find_repository_root() -> Path:
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as e:
        log.warning("ci.root_fallback", reason=str(e))
        return Path.cwd()
    return Path(result.stdout.strip())


def run(settings: Settings, root: Path) -> int:
    matrix = generate_matrix(
        settings.ci_php_versions,
        root / settings.ci_plugins_dir,
        root / settings.ci_apps_dir,
    )
    try:
        sys.stdout.write(render_matrix(matrix))
    except ValueError as e:
        # Includes pydantic serialisation errors and undecodable directory names.
        sys.stderr.write(
            f"Could not generate matrix for project: {root.name}.\nERROR: {e}\n"
        )
    return 0


def main() -> int:
    settings = get_settings()
    # stdout carries the matrix; logs go to stderr.
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        stream=sys.stderr,
        replace_handlers=True,
    )
    return run(settings, find_repository_root())


if __name__ == "__main__":
    raise SystemExit(main())


# --- Module Notes -----------------------------------------------------------
# The job always exits 0; a broken matrix shows up as an empty CI strategy, not a
# failed pipeline step.
