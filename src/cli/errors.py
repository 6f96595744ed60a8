"""Translation of run errors into CLI exit codes."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from core.domain.errors import EXIT_GENERIC_ERROR, DeviceRunnerError

_console = Console(stderr=True)


def print_error(label: str, message: object) -> None:
    _console.print(Text.assemble((f"{label}: ", "bold red"), str(message)))


@contextmanager
def exit_on_error() -> Iterator[None]:
    """Turn `DeviceRunnerError`, invalid settings and unexpected errors into `typer.Exit`."""

    try:
        yield
    except typer.Exit:
        raise
    except DeviceRunnerError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    except ValidationError as exc:
        print_error("Invalid configuration", exc)
        raise typer.Exit(code=EXIT_GENERIC_ERROR) from exc
    except Exception as exc:
        print_error("Error", exc)
        raise typer.Exit(code=EXIT_GENERIC_ERROR) from exc
