"""
CV -> LaTeX Converter

Main module providing convenience functions for turning CV files into LaTeX.

This module exports:
- Convenience function: cv_to_latex (file in, LaTeX string out)
- Orchestration function: generate_cv_file (file in, .tex file out, with logging and timing)
- Converter class: CVToLaTeXConverter (re-exported)
"""

import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from cvtex.contexts.templating.cv_data_structure import load_cv_record
from cvtex.contexts.templating.latex_generator import CVToLaTeXConverter, generate_cv_latex
from cvtex.contexts.templating.layouts import resolve_template_id
from cvtex.contexts.templating.logger import (
    _log_debug,
    log_generation_result,
    log_generation_start,
    setup_templating_logger,
)

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


@dataclass
class GenerationResult:
    """Result from generate_cv_file() orchestration function."""

    success: bool
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    template: Optional[str] = None
    error: Optional[str] = None
    time_s: float = 0.0
    log_dir: Optional[Path] = None


def cv_to_latex(input_path: Path, template: Optional[str] = None) -> str:
    """
    Load a CV file and return its LaTeX document.

    Args:
        input_path: YAML or JSON CV file
        template: Overrides the template stored in the file

    Returns:
        LaTeX document string
    """
    cv = load_cv_record(input_path)
    return generate_cv_latex(cv, template=template)


def generate_cv_file(
    input_path: Path,
    output_path: Optional[Path] = None,
    template: Optional[str] = None,
    allow_overwrite: bool = True,
    log_dir: Optional[Path] = None,
) -> GenerationResult:
    """
    Generate a .tex file from a CV file with logging and timing.

    Failures (missing file, malformed top level, broken template) are reported
    in the result instead of raised.

    Args:
        input_path: YAML or JSON CV file
        output_path: Destination .tex file. Defaults to input_path with a .tex suffix.
        template: Overrides the template stored in the file
        allow_overwrite: Allow overwriting an existing output file (default: True)
        log_dir: When given, configure templating logging into this directory

    Returns:
        GenerationResult with success status, paths, resolved template and timing

    Raises:
        ValueError: If output exists and allow_overwrite is False
    """
    input_path = Path(input_path)
    output_path = Path(output_path) if output_path else input_path.with_suffix(".tex")

    if not allow_overwrite and output_path.exists():
        raise ValueError(f"Output file already exists: {output_path}")

    start_time = time.time()
    cv_name = input_path.stem

    log_file = None
    if log_dir is not None:
        log_file = setup_templating_logger(log_dir, phase="generate", Input=input_path)
    log_generation_start(cv_name, input_path, log_file)

    try:
        cv = load_cv_record(input_path)
        template_id = resolve_template_id(template or cv.template)
        latex = generate_cv_latex(cv, template=template_id.value)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(latex, encoding="utf-8")
        _log_debug(f"Wrote {len(latex)} characters to {output_path}")

        result = GenerationResult(
            success=True,
            input_path=input_path,
            output_path=output_path,
            template=template_id.value,
            time_s=time.time() - start_time,
            log_dir=log_dir,
        )
    except Exception as e:
        result = GenerationResult(
            success=False,
            input_path=input_path,
            error=str(e),
            time_s=time.time() - start_time,
            log_dir=log_dir,
        )

    log_generation_result(cv_name, result)
    return result


__all__ = [
    "CVToLaTeXConverter",
    "GenerationResult",
    "cv_to_latex",
    "generate_cv_file",
    "LOGS_PATH",
]
