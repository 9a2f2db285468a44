"""wish - a small parallel-command shell."""

from .executor import Executor, LineReport
from .parser import ParsedCommand, parse_line
from .paths import SearchPath

__version__ = "0.1.0"

__all__ = ["Executor", "LineReport", "ParsedCommand", "SearchPath", "parse_line"]
