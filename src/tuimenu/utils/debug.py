"""Debug logging utility.

Lines only go to the log file while the menu owns the screen; errors are
also echoed to stderr once the terminal has been restored.
"""

import sys
from datetime import datetime

from tuimenu.utils.config import Config, get_tuimenu_dir

_config = None


def _get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = Config(get_tuimenu_dir())
    return _config


def reload_config():
    """Reload config (call after debug mode changes)."""
    global _config
    _config = None


def _log_to_file(line: str):
    """Append line to debug log file."""
    try:
        log_path = get_tuimenu_dir() / "debug.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(log_path, "a") as f:
            f.write(line + "\n")
    except OSError:
        pass  # Log file unwritable


def _timestamp() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Args:
        category: Category like 'loop', 'key', 'render', 'cli'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    config = _get_config()
    if not config.debug:
        return

    extras = " ".join(f"{k}={v}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[tuimenu:{category}] {_timestamp()} {message}"
    if extras:
        line += f" | {extras}"

    _log_to_file(line)


def debug_loop(message: str, **kwargs):
    """Log loop-related debug message."""
    debug("loop", message, **kwargs)


def debug_key(message: str, **kwargs):
    """Log key-dispatch debug message."""
    debug("key", message, **kwargs)


def log_error(category: str, message: str, exc: Exception = None):
    """Log error message ALWAYS (even if debug mode is off).

    Call only after the terminal has been restored, since this also
    writes to stderr.

    Args:
        category: Category like 'cli', 'terminal'
        message: Error message
        exc: Optional exception to include traceback
    """
    import traceback

    line = f"[tuimenu:{category}] {_timestamp()} ERROR: {message}"

    if exc:
        tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
        line += "\n" + "".join(tb)

    _log_to_file(line)

    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass
