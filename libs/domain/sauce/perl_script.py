from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from .records import ConfigurationRecord
from .run_config import RunConfiguration

HEADER = "#! perl -slw\nuse strict;\nuse Thread qw(yield async);\n"

DEFAULT_EXECUTABLE = "mvn install"
DEFAULT_RESULTS_DIR_PREFIX = "failsafe-reports-"

# Rendered in place of a missing browser, os or browser-version.
_MISSING = "null"


@dataclass(frozen=True)
class GeneratedScript:
    header: str
    tasks: List[str]
    joins: List[str]
    prints: List[str]

    def chunks(self) -> List[str]:
        out: List[str] = [self.header]
        out.extend(self.tasks)
        out.append("".join(self.joins))
        out.append("".join(self.prints))
        return out

    def render(self) -> str:
        return "".join(chunk + "\n" for chunk in self.chunks())


def _value(value: Optional[str]) -> str:
    return _MISSING if value is None else value


def build_command(
    record: ConfigurationRecord,
    run: RunConfiguration,
    index: int,
    *,
    executable: str = DEFAULT_EXECUTABLE,
    results_dir_prefix: str = DEFAULT_RESULTS_DIR_PREFIX,
) -> str:
    """
    Maven command line for one record. Flag names and their order are read
    by the downstream test harness and must not change.
    """
    parts: List[str] = [
        executable,
        f" -P{run.profile}",
        f" -Dtest.env={run.environment}",
    ]
    if run.resolution is not None:
        parts.append(f" -Dbrowser.resolution={run.resolution}")
    parts.append(f' -Dbrowser="{_value(record.browser)}"')
    parts.append(f' -Dplatform="{_value(record.os)}"')
    parts.append(f" -Dbrowser.version={_value(record.browser_version)}")
    if record.os:
        parts.append(f' -Dos="{record.os}"')
    if record.device:
        parts.append(f' -DdeviceName="{record.device}"')
    if record.device_orientation:
        parts.append(f' -DdeviceOrientation="{record.device_orientation}"')
    parts.append(f" -Dtest.results.dir={results_dir_prefix}{index}")
    return "".join(parts)


def render_task(command: str, index: int) -> str:
    return f"my $t{index} = async{{\n`{command}`\n}};\n"


def generate_script(
    run: RunConfiguration,
    records: Iterable[ConfigurationRecord],
    *,
    executable: str = DEFAULT_EXECUTABLE,
    results_dir_prefix: str = DEFAULT_RESULTS_DIR_PREFIX,
) -> GeneratedScript:
    tasks: List[str] = []
    for index, record in enumerate(records):
        command = build_command(
            record,
            run,
            index,
            executable=executable,
            results_dir_prefix=results_dir_prefix,
        )
        tasks.append(render_task(command, index))

    count = len(tasks)
    return GeneratedScript(
        header=HEADER,
        tasks=tasks,
        joins=[f"my $output{i} = $t{i}->join;\n" for i in range(count)],
        prints=[f"print $output{i};\n" for i in range(count)],
    )


def write_script(script: GeneratedScript, path: str) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(script.render(), encoding="utf-8")
