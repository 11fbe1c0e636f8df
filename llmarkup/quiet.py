"""Process-wide quiet mode.

Wraps ``rich.console.Console.print`` once so that, while quiet mode is on,
only error output reaches the terminal. Data written with ``click.echo``
(JSON, extracted sections) is not affected.
"""
import rich.console

_quiet = False
_patched = False

_ERROR_MARKERS = ("[error]", "[bold red]", "[red]", "Error:", "error:")


def _is_error(message) -> bool:
    if not message:
        return False
    text = str(message)
    return any(marker in text for marker in _ERROR_MARKERS)


def _install_patch():
    global _patched
    if _patched:
        return
    _patched = True

    original_print = rich.console.Console.print

    def _print(self, *args, **kwargs):
        if not _quiet or kwargs.get("style") == "error" or (args and _is_error(args[0])):
            original_print(self, *args, **kwargs)

    rich.console.Console.print = _print


def enable_quiet_mode():
    global _quiet
    _quiet = True
    _install_patch()


def disable_quiet_mode():
    global _quiet
    _quiet = False
