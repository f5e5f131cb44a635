"""Utilities for building CLI artifact output paths."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


def ensure_parent_dir(path: Path) -> None:
    """Ensure the parent directory exists for a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)


def results_path_for_run(
    scenario_path: Path,
    output_dir: Optional[Path],
    results_override: Optional[Path],
) -> Path:
    """Determine the results JSON path for the ``run`` command.

    - An absolute ``results_override`` is returned as-is; a relative one is
      placed under ``output_dir`` when that is given.
    - Else if ``output_dir`` is provided, return ``output_dir/<stem>.results.json``.
    - Else, return ``<stem>.results.json`` in the current working directory.
    """
    if results_override is not None:
        if results_override.is_absolute() or output_dir is None:
            return results_override
        return output_dir / results_override

    name = f"{scenario_path.stem}.results.json"
    if output_dir is not None:
        return output_dir / name
    return Path(name)
