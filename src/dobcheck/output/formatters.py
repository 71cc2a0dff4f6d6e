"""Select the output mode for a ServiceResult.

- ``--json``: the pydantic JSON dump of the whole result.
- ``--quiet``: one line, ``OK: <op>`` or ``ERROR: <op> — <message>``.
- default: rich renderers from :mod:`dobcheck.output.renderers`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from dobcheck.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from dobcheck.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output-related subset of the CLI flags."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format *result* for display according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
