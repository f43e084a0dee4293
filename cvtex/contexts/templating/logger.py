"""
Templating context logger.

Every message from the templating context carries the [template] prefix.
Templating modules log through the helpers here, never through loguru or
utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from cvtex.utils.logger import setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(
    log_dir: Path, phase: str = "generate", console: bool = True, **extra_provenance
) -> Path:
    """
    Start a templating log session.

    Args:
        log_dir: Directory for this session
        phase: Recorded in the provenance block
        console: Mirror INFO and above to stderr
        **extra_provenance: More provenance entries (e.g. Input=path)

    Returns:
        Path to log file

    Example:
        log_file = setup_templating_logger(log_dir, Input=input_path)
        _log_info("Rendering...")
    """
    return setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Phase": phase, **extra_provenance},
        console=console,
    )


def _log(level: str, message: str) -> None:
    logger.log(level, f"{CONTEXT_PREFIX} {message}")


def _log_info(message: str) -> None:
    _log("INFO", message)


def _log_success(message: str) -> None:
    _log("SUCCESS", message)


def _log_error(message: str) -> None:
    _log("ERROR", message)


def _log_warning(message: str) -> None:
    _log("WARNING", message)


def _log_debug(message: str) -> None:
    _log("DEBUG", message)


def log_generation_start(cv_name: str, input_path: Path, log_file: Path = None) -> None:
    """Announce a file generation, with the log location when one is set up."""
    _log_info(f"Starting to generate {cv_name}")
    if log_file:
        _log_info(f"Log file: {log_file}")
    _log_debug(f"Source: {input_path}")


def log_generation_result(cv_name: str, result) -> None:
    """
    Log the outcome of generate_cv_file().

    Args:
        cv_name: CV identifier (input file stem)
        result: GenerationResult
    """
    if not result.success:
        _log_error(f"Failed to generate {cv_name} ({result.time_s:.2f}s)")
        _log_error(f"  Error: {result.error}")
        return

    _log_success(f"{cv_name}: generate succeeded with '{result.template}' ({result.time_s:.2f}s)")
    _log_info(f"  Output: {result.output_path}")
