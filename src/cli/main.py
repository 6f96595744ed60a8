"""CLI entrypoint (Typer).

`rn-device-runner [--prefer ios|android]` detects a connected device and
launches the app on it; `rn-device-runner doctor` only reports what it would do.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as package_version

import typer

from cli.context import build_context
from cli.doctor import doctor
from cli.errors import exit_on_error, print_error
from core.config import APP_NAME
from core.domain.errors import EXIT_GENERIC_ERROR
from core.domain.models import Platform

app = typer.Typer(
    add_completion=False,
    help="🚀 Auto device detection & React Native/Expo app runner",
)
app.command(name="doctor")(doctor)


def _get_version() -> str:
    try:
        return package_version(APP_NAME)
    except PackageNotFoundError:
        return "0.0.0"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {_get_version()}")
        raise typer.Exit()


def parse_platform(value: str) -> Platform:
    """`--prefer` value to Platform; exits 1 (not Click's usage code 2) when unknown."""

    try:
        return Platform(value.strip().lower())
    except ValueError:
        choices = " | ".join(platform.value for platform in Platform)
        print_error("Invalid --prefer value", f"{value!r} (expected {choices})")
        raise typer.Exit(code=EXIT_GENERIC_ERROR) from None


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    prefer: str = typer.Option(
        Platform.IOS.value,
        "--prefer",
        help="Preferred platform to run when both devices are connected (ios | android).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Detect a connected iOS/Android device and run the app on it."""

    platform = parse_platform(prefer)
    if ctx.invoked_subcommand is not None:
        return

    with exit_on_error():
        context = build_context()
        context.device_runner().run(platform)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
