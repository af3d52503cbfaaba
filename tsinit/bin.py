"""Process entry point for tsconfig-init.

Resolves the package's asynchronous ``run`` operation, drives it to
completion exactly once and maps the outcome onto the process. Success does
nothing and leaves the exit status at 0. Any failure, raised synchronously or
while awaiting, writes one error line to stderr and exits with status 1.
"""

from __future__ import annotations

import asyncio
import importlib
import inspect
import sys
from typing import Any, Awaitable, Callable, NoReturn

from tsinit.cli.utils import TsinitConsole, describe_error, format_error

# Diagnostics only; stdout belongs to the run operation
error_console = TsinitConsole(stderr=True)


def _load_run() -> Callable[[], Any]:
    """Look up ``run`` on the package at call time."""
    package = importlib.import_module(__package__ or "tsinit")
    return getattr(package, "run")


async def _settle(pending: Awaitable[Any]) -> Any:
    return await pending


def _invoke(run: Callable[[], Any]) -> None:
    pending = run()
    if inspect.isawaitable(pending):
        asyncio.run(_settle(pending))


def _fail(error: Exception) -> NoReturn:
    error_console.print(format_error(describe_error(error)), soft_wrap=True)
    error_console.file.flush()
    sys.exit(1)


def main() -> None:
    """Run tsconfig-init and translate its outcome into an exit status."""
    try:
        _invoke(_load_run())
    except Exception as e:
        _fail(e)
