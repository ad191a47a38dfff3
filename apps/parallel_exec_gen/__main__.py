from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from libs.common.logging_config import setup_logging
from libs.domain.sauce.io import parse_records
from libs.domain.sauce.perl_script import generate_script, write_script
from libs.domain.sauce.run_config import resolve_run_configuration

from .app_config import AppConfig

logger = logging.getLogger(__package__)


def _default_config_path() -> Path:
    return Path(__file__).with_name("config.yml")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apps.parallel_exec_gen",
        description=(
            "Generate a Perl script that runs one Maven build per Sauce Labs "
            "browser in parallel."
        ),
    )
    parser.add_argument("profile", help="Maven profile name (-P).")
    parser.add_argument("environment", help="Test environment name (-Dtest.env).")
    parser.add_argument(
        "resolution",
        nargs="?",
        help='Browser resolution, e.g. 1920x1200. "none" lets Sauce Labs choose.',
    )
    parser.add_argument("output_dir", nargs="?", help="Directory to write the script to.")
    parser.add_argument("output_file", nargs="?", help='Script file name (".pl" is appended).')
    parser.add_argument(
        "-c",
        "--config",
        default=str(_default_config_path()),
        help='Path to YAML config (default: module-local "config.yml").',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    cfg = AppConfig.from_yaml(Path(args.config))
    setup_logging(cfg.logging.level)

    browsers = os.environ.get(cfg.source.env_var)
    logger.info("%s = %s", cfg.source.env_var, browsers)

    positional = [
        value
        for value in (args.profile, args.environment, args.resolution, args.output_dir, args.output_file)
        if value is not None
    ]
    run = resolve_run_configuration(
        positional,
        default_resolution=cfg.resolution.default,
        accepted_resolutions=cfg.resolution.accepted,
        default_file_name=cfg.output.default_file_name,
        extension=cfg.output.extension,
    )

    out_path = Path(run.output_path)
    try:
        out_path.unlink(missing_ok=True)
    except OSError as exc:
        logger.error("Could not remove %s: %s", out_path, exc)
        return 0
    logger.info("Writing Parallel Executor to Path=%s", out_path)

    if not browsers:
        logger.warning("%s is empty, no script generated", cfg.source.env_var)
        return 0

    parsed = parse_records(browsers)
    if not parsed.ok:
        logger.error(parsed.error)
        return 0

    script = generate_script(
        run,
        parsed.records,
        executable=cfg.command.executable,
        results_dir_prefix=cfg.command.results_dir_prefix,
    )
    try:
        write_script(script, run.output_path)
    except OSError as exc:
        logger.error("Could not write %s: %s", out_path, exc)
        return 0
    print(f"Saved {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
