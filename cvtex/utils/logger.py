"""
Session logging for CVTeX commands.

A session writes everything to <log_dir>/<context>.log and, unless the
command's own output goes to the terminal, mirrors INFO and above to stderr.
Each session starts with a provenance block so a log file explains itself.

Context-specific prefixes live in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from loguru import logger

import cvtex

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

# Console colors per level; levels not listed keep loguru's defaults
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, object]] = None,
    level_colors: Optional[Dict[str, str]] = None,
    console: bool = True,
) -> Path:
    """
    Replace loguru's handlers with a file sink for this session.

    Args:
        context_name: Context identifier, used as the log file name (e.g., "template")
        log_dir: Session directory, created if missing
        extra_provenance: Key-value pairs appended to the provenance block
        level_colors: Console color overrides (e.g., {"INFO": "<cyan>"})
        console: Mirror INFO and above to stderr. Turn off when stdout or
                 stderr carries generated output.

    Returns:
        Path to the session log file

    Example:
        from cvtex.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="template",
            log_dir=Path("outs/logs/generate_20251114_123456"),
            extra_provenance={"Input": "cv.yaml"},
        )
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")

    if console:
        for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
            logger.level(level_name, color=color)
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: Optional[Dict[str, object]] = None) -> None:
    """
    Log where and how the current command was run.

    Args:
        extra_context: Additional key-value pairs to log after the standard ones
    """
    provenance = {
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        "cvtex": cvtex.__version__,
        **(extra_context or {}),
    }

    logger.info("=" * 80)
    for key, value in provenance.items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 80)
