from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_FILE_NAME = "parallel-exec.pl"
SCRIPT_EXTENSION = ".pl"

# Screen resolutions accepted by the Sauce Labs test configuration API.
DEFAULT_RESOLUTION = "1280x1024"
ACCEPTED_RESOLUTIONS = (
    "800x600", "1024x768", "1152x720", "1152x864", "1152x900", "1280x720",
    "1280x768", "1280x800", "1280x960", "1280x1024", "1366x768", "1376x1032",
    "1400x1050", "1440x900", "1600x900", "1600x1200", "1680x1050", "1920x1200",
    "1920x1440", "2048x1152", "2048x1536", "2360x1770",
)

NO_RESOLUTION = "none"


@dataclass(frozen=True)
class RunConfiguration:
    profile: str
    environment: str
    resolution: Optional[str]
    output_path: str


def resolve_resolution(
    value: Optional[str],
    *,
    default: str = DEFAULT_RESOLUTION,
    accepted: Sequence[str] = ACCEPTED_RESOLUTIONS,
) -> Optional[str]:
    """
    None means no -Dbrowser.resolution flag, so Sauce Labs applies its own
    default. That covers both an omitted argument and an explicit "none".
    """
    if value is None or value.lower() == NO_RESOLUTION:
        return None
    if value in accepted:
        return value
    logger.warning("Unsupported browser resolution %r, using %s", value, default)
    return default


def resolve_output_path(
    output_dir: Optional[str] = None,
    file_name: Optional[str] = None,
    *,
    default_file_name: str = DEFAULT_OUTPUT_FILE_NAME,
    extension: str = SCRIPT_EXTENSION,
) -> str:
    directory = ""
    if output_dir:
        directory = output_dir if output_dir.endswith(("/", "\\")) else output_dir + "/"

    if file_name is None:
        file_name = default_file_name
    elif not file_name.endswith(extension):
        file_name = file_name + extension

    return directory + file_name


def resolve_run_configuration(
    args: Sequence[str],
    *,
    default_resolution: str = DEFAULT_RESOLUTION,
    accepted_resolutions: Sequence[str] = ACCEPTED_RESOLUTIONS,
    default_file_name: str = DEFAULT_OUTPUT_FILE_NAME,
    extension: str = SCRIPT_EXTENSION,
) -> RunConfiguration:
    """
    Build a RunConfiguration from the positional arguments
    [profile, environment, resolution?, output_dir?, output_file_name?].

    profile and environment are required; indexing a shorter sequence raises
    IndexError.
    """

    def _optional(index: int) -> Optional[str]:
        return args[index] if len(args) > index else None

    return RunConfiguration(
        profile=args[0],
        environment=args[1],
        resolution=resolve_resolution(
            _optional(2), default=default_resolution, accepted=accepted_resolutions
        ),
        output_path=resolve_output_path(
            _optional(3),
            _optional(4),
            default_file_name=default_file_name,
            extension=extension,
        ),
    )
