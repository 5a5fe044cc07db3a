"""The ``kslibs`` command: build, run, edit and show a project, or fetch a library."""

from __future__ import annotations

import contextlib
import os
import subprocess
import sys
from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from kslibs.colors import Fg, Style, print_styled, styled
from kslibs.command import build_command
from kslibs.config import DEFAULT_CONFIG_PATH, ProjectConfig, obtain_config
from kslibs.dataparser import format_data_lib, parse_data_lib
from kslibs.downloader import DownloadError, HTTPDownloader

DB_URL_ENV = "KSLIBS_DB_URL"


class Action(Enum):
    """What one invocation does."""

    RUN = "-r"
    CLEAN = "-cln"
    COMPILE = "-c"
    EDIT = "-ed"
    SHOW = "-cmd"
    DOWNLOAD = "-dowl"
    HELP = "help"


_PRIORITY = (
    Action.RUN,
    Action.CLEAN,
    Action.COMPILE,
    Action.EDIT,
    Action.SHOW,
    Action.DOWNLOAD,
)

_OPTIONS = (
    ("RUN project:\t\t\t", "-r"),
    ("CLEAN project:\t\t\t", "-cln"),
    ("COMPILE project:\t\t", "-c"),
    ("EDIT configuration:\t\t", "-ed"),
    ("SHOW command to compile:\t", "-cmd"),
    ("DOWNLOAD an available lib:\t", "-dowl {NAME_OF_LIB}"),
)


def parse_actions(args: Sequence[str]) -> set[Action]:
    """Return the actions requested by ``args`` (program name excluded).

    ``-dowl`` only counts when a library follows among the arguments.
    """
    actions = set()
    for arg in args:
        if arg == Action.DOWNLOAD.value:
            if len(args) >= 2:
                actions.add(Action.DOWNLOAD)
            continue
        with contextlib.suppress(ValueError):
            action = Action(arg)
            if action is not Action.HELP:
                actions.add(action)
    return actions


def _select(actions: set[Action]) -> Action:
    return next((action for action in _PRIORITY if action in actions), Action.HELP)


def file_name_from_url(url: str) -> str:
    """Return what follows the last ``/`` or ``\\`` of ``url``, or ``""``."""
    position = max(url.rfind("/"), url.rfind("\\"))
    if position <= 0:
        return ""
    return url[position + 1 :]


def help_text(config: ProjectConfig) -> str:
    """Return the list of options followed by the project's settings."""
    lines = [styled(Style.UNDERLINE, Style.REVERSED, Fg.CYAN, "\nOptions availables:")]
    lines.extend(
        styled(Style.BOLD, Fg.YELLOW, label, Style.REVERSED, Fg.BLACK, flag)
        for label, flag in _OPTIONS
    )
    lines.append(styled(Style.BOLD, Fg.YELLOW, " "))
    lines.append(styled(Style.REVERSED, Fg.RED, "ACTUAL INFORMATION OF THE PROJECT:"))
    info = (
        f"Project Name:\t{config.project_name}"
        f"\nOutput Name:\t{config.output_name}"
        f"\nSource Path:\t{config.source_path}"
        f"\nHeaders Path:\t{config.headers_path}"
        f"\nLib Path:\t{config.lib_path}"
        f"\nLib Names:\t{config.lib_names}"
    )
    return "\n".join(lines) + "\n" + info


def compile_project(config: ProjectConfig) -> int:
    """Remove the old output and compile the project, hiding compiler stdout."""
    with contextlib.suppress(OSError):
        Path(config.output_name).unlink()
    result = subprocess.run(
        build_command(config), shell=True, stdout=subprocess.DEVNULL, check=False
    )
    print()
    return result.returncode


def run_project(config: ProjectConfig) -> int:
    """Compile the project, then start the program it produced."""
    compile_project(config)
    result = subprocess.run(config.output_name, shell=True, check=False)
    return result.returncode


def download_library(url: str, downloader: HTTPDownloader | None = None) -> Path:
    """Fetch ``url`` into a file named after its last path component.

    When ``KSLIBS_DB_URL`` is set, the library listing found there is
    printed first; failing to fetch it does not stop the download.
    """
    client = HTTPDownloader() if downloader is None else downloader
    db_url = os.environ.get(DB_URL_ENV)
    if db_url:
        try:
            listing = client.download(db_url)
        except DownloadError as exc:
            print(exc, file=sys.stderr)
        else:
            print(format_data_lib(parse_data_lib(listing)))
    name = file_name_from_url(url)
    if not name:
        raise DownloadError(f"cannot derive a file name from {url!r}")
    return client.download_to_file(url, name)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the ``kslibs`` command."""
    args = list(sys.argv[1:] if argv is None else argv)
    actions = parse_actions(args)
    if Action.DOWNLOAD.value in args and len(args) < 2:
        print_styled(
            Style.REVERSED,
            Fg.RED,
            "Not enough arguments to the option -dowl. REQUIRED: 3; GIVEN: ",
            len(args) + 1,
        )

    found = obtain_config(DEFAULT_CONFIG_PATH, input)
    if found is None:
        return 1
    path, config = found

    action = _select(actions)
    if action is Action.RUN:
        return run_project(config)
    if action is Action.CLEAN:
        return 0
    if action is Action.COMPILE:
        return compile_project(config)
    if action is Action.EDIT:
        from kslibs.editor import ConfigEditor

        editor = ConfigEditor(config, path)
        sys.stdout.write(editor.render())
        editor.run()
        return 0
    if action is Action.SHOW:
        print_styled(
            Style.BOLD,
            Fg.GREEN,
            "\nThe following cmd is used to compile the project:\n--> ",
            build_command(config),
        )
        return 0
    if action is Action.DOWNLOAD:
        try:
            download_library(args[1])
        except DownloadError as exc:
            print(exc, file=sys.stderr)
            print("ERROR")
            return 1
        return 0
    print(help_text(config))
    return 0


if __name__ == "__main__":
    sys.exit(main())