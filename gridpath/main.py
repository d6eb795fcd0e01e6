# gridpath/main.py
"""Console bootstrap: configure logging and run grid commands from stdin."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Sequence

from .config import CONFIG, CONFIG_PATH, load_config
from .utils.cli.command_parser import parse_command
from .utils.cli.commands import execute, new_state


log_level_str = CONFIG.logging.global_level
numeric_level = getattr(logging, log_level_str, logging.INFO)
logging.basicConfig(
    level=numeric_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)
logger = logging.getLogger(__name__)

# Apply per-module levels if defined
if CONFIG.logging.module_levels:
    for module_name, level_str in CONFIG.logging.module_levels.items():
        module_numeric_level = getattr(logging, level_str.upper(), None)
        if module_numeric_level is not None:
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config_path: str | Path | None = None) -> Dict[str, Any]:
    """Return console state using search defaults from ``config_path``.

    Without a path the repository ``config.yaml`` is used, wherever the
    console is started from.
    """

    cfg = load_config(CONFIG_PATH if config_path is None else Path(config_path))
    state = new_state()
    state["diagonal"] = cfg.search.diagonal
    state["closest"] = cfg.search.closest
    state["heuristic"] = cfg.search.heuristic
    logger.info(
        "[Bootstrap] diagonal=%s closest=%s heuristic=%s",
        state["diagonal"],
        state["closest"],
        state["heuristic"] or "auto",
    )
    return state


def run_lines(lines: Iterable[str], state: Dict[str, Any]) -> Dict[str, Any]:
    """Execute each command line until input ends or ``/quit`` is seen."""

    for line in lines:
        line = line.strip()
        if not line:
            continue
        cmd = parse_command(line)
        if cmd is None:
            logger.warning("Ignoring '%s': commands start with '/'.", line)
            continue
        execute(cmd.name, cmd.args, state)
        if not state.get("running", True):
            break
    return state


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    state = bootstrap()
    if args:
        execute("load", [args[0]], state)
    logger.info("Grid console ready. Type /help for commands.")
    try:
        run_lines(sys.stdin, state)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
