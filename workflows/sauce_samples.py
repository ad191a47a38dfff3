from __future__ import annotations

import json
import shlex
from typing import Any, Dict, List

import typer

app = typer.Typer(add_completion=False)

ENV_VAR = "SAUCE_ONDEMAND_BROWSERS"

# Shapes mirror what the Jenkins Sauce OnDemand plugin exports, minus credentials.
BROWSER_SAMPLE: List[Dict[str, Any]] = [
    {
        "os": "Windows 10",
        "platform": "XP",
        "browser": "chrome",
        "browser-version": "45",
        "long-name": "Chrome",
        "long-version": "10.0.2.",
    },
    {
        "os": "Windows 10",
        "platform": "XP",
        "browser": "chrome",
        "browser-version": "44",
        "long-name": "Chrome",
        "long-version": "12.0.",
    },
]

MOBILE_SAMPLE: List[Dict[str, Any]] = [
    {
        "os": "android",
        "platform": "ANDROID",
        "browser": "android",
        "browser-version": "4.4",
        "long-name": "LG Nexus 4 Emulator",
        "long-version": "4.4.",
        "device": "LG Nexus 4 Emulator",
        "device-orientation": "portrait",
    },
    {
        "os": "android",
        "platform": "ANDROID",
        "browser": "android",
        "browser-version": "4.4",
        "long-name": "Samsung Galaxy Nexus Emulator",
        "long-version": "4.4.",
        "device": "Samsung Galaxy Nexus Emulator",
        "device-orientation": "landscape",
    },
]


def _emit(sample: List[Dict[str, Any]], export: bool) -> None:
    payload = json.dumps(sample, separators=(",", ":"))
    if export:
        typer.echo(f"export {ENV_VAR}={shlex.quote(payload)}")
    else:
        typer.echo(payload)


@app.command()
def browser(
    export: bool = typer.Option(False, "--export", help="Print as a shell export line."),
) -> None:
    """
    Desktop browser payload (two Chrome versions on Windows 10).
    """
    _emit(BROWSER_SAMPLE, export)


@app.command()
def mobile(
    export: bool = typer.Option(False, "--export", help="Print as a shell export line."),
) -> None:
    """
    Mobile emulator payload (two Android devices, both orientations).
    """
    _emit(MOBILE_SAMPLE, export)


if __name__ == "__main__":
    app()
