from __future__ import annotations

import logging
import sys
from typing import List, Optional, Sequence, TextIO

from cmdflags.builtins import MINLOGLEVEL, log_level_for
from cmdflags.cleanup import FlagCleanup
from cmdflags.flags import REGISTRY
from cmdflags.flags.registry import FlagRegistry
from cmdflags.parser import CommandLineParser, Terminate

logger = logging.getLogger("cmdflags.app")
logger.addHandler(logging.NullHandler())


def parse_command_line_flags(
    argv: Optional[Sequence[str]] = None,
    *,
    registry: Optional[FlagRegistry] = None,
    version: Optional[str] = None,
    remove_flags: bool = True,
    cleanup: Optional[FlagCleanup] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> List[str]:
    """
    Parse ``argv`` (default ``sys.argv``) into ``registry`` and return the
    remaining arguments, program name first.

    On ``--help``/``--version`` the text is written to stdout and SystemExit(0)
    is raised; on any parse error the diagnostic goes to stderr and
    SystemExit(1) is raised.
    """
    registry = REGISTRY if registry is None else registry
    parser = CommandLineParser(registry, version=version, remove_flags=remove_flags)
    if cleanup is not None:
        cleanup.track(parser)

    result = parser.parse(sys.argv if argv is None else argv)
    if isinstance(result, Terminate):
        if result.exit_code == 0:
            stream = sys.stdout if stdout is None else stdout
        else:
            stream = sys.stderr if stderr is None else stderr
        stream.write(result.message)
        if not result.message.endswith("\n"):
            stream.write("\n")
        stream.flush()
        raise SystemExit(result.exit_code)

    # the host's own logging setup stands unless minloglevel was overridden
    minloglevel = registry.lookup(MINLOGLEVEL) if MINLOGLEVEL in registry else None
    if minloglevel is not None and minloglevel.current_value != minloglevel.default_value:
        level = log_level_for(minloglevel.current_value)
        logging.getLogger().setLevel(level)
        logger.debug("Root log level set to %s", logging.getLevelName(level))
    return result.argv
