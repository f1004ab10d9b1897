import sys
from rich.console import Console as RichConsole
import structlog

from findr.core.entries import TraversalError
from findr.exceptions import OutputError

log = structlog.get_logger(__name__)

# resolves sys.stderr on every write, so redirected streams are honoured.
stderr_console = RichConsole(stderr=True, markup=False, highlight=False, emoji=False, soft_wrap=True)

def write_match(path: str):
    # writes one matched path to standard output and flushes, so matches stream.
    line = f"{path}\n"
    try:
        sys.stdout.write(line)
        sys.stdout.flush()
    except UnicodeEncodeError as e:
        log.debug("stdout_write_failed_trying_binary_fallback", error=str(e))
        try:
            sys.stdout.buffer.write(line.encode("utf-8", errors="surrogateescape"))
            sys.stdout.buffer.flush()
        except Exception as inner_e:
            raise OutputError(f"failed to write match '{path}' to stdout: {inner_e}")
    except OSError as e:
        raise OutputError(f"failed to write match '{path}' to stdout: {e}")

def write_error(error: TraversalError):
    # reports a traversal error on stderr without interrupting the walk.
    stderr_console.print(f"Error: {error.message}")
