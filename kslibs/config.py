"""The ``.config.kslibs`` project file: parsing, writing and interactive setup."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import IO

from kslibs.colors import Fg, Style, print_styled, styled

DEFAULT_CONFIG_PATH = ".config.kslibs"

KEYS = ("ProjectName", "OutputName", "SourcePath", "HeadersPath", "LibPath", "LibNames")

PathLike = str | os.PathLike
Prompt = Callable[[str], str]


class ConfigError(ValueError):
    """Raised when a project file is corrupt or incomplete."""


@dataclass
class ProjectConfig:
    """The settings of one project."""

    project_name: str
    output_name: str
    source_path: str
    headers_path: str
    lib_path: str
    lib_names: str

    def as_dict(self) -> dict[str, str]:
        """Return the settings keyed by their names in the file."""
        return {
            "ProjectName": self.project_name,
            "OutputName": self.output_name,
            "SourcePath": self.source_path,
            "HeadersPath": self.headers_path,
            "LibPath": self.lib_path,
            "LibNames": self.lib_names,
        }

    def to_text(self) -> str:
        """Return the settings in the file's ``Key: value`` layout."""
        return "\n".join(f"{key}: {value}" for key, value in self.as_dict().items())


def _separator_positions(line: str) -> Iterator[int]:
    """Yield the index of the space of every ``": "`` in ``line``."""
    for i in range(1, len(line)):
        if line[i - 1] == ":" and line[i] == " ":
            yield i


def _raw_value(line: str) -> str:
    return "".join(line[i + 1 :] for i in _separator_positions(line))


def _compact_value(line: str) -> str:
    stop = len(line) - 1 if line.endswith(";") else len(line)
    return "".join(line[i + 1 : stop].replace(" ", "") for i in _separator_positions(line))


def _from_end(value: str, k: int) -> str:
    return value[-k] if len(value) >= k else ""


def _source_value(line: str) -> str:
    value = _compact_value(line)
    if (
        value
        and _from_end(value, 1) not in ("/", "p")
        and _from_end(value, 2) != "p"
        and _from_end(value, 3) != "c"
        and _from_end(value, 4) != "."
    ):
        value += "/"
    return value


def _headers_value(line: str) -> str:
    value = _compact_value(line)
    if (
        value
        and _from_end(value, 1) not in ("/", "h", "p")
        and _from_end(value, 2) not in (".", "p")
        and _from_end(value, 3) != "h"
        and _from_end(value, 4) != "."
    ):
        value += "/"
    return value


def _lib_path_value(line: str) -> str:
    value = _raw_value(line)
    if value and not value.endswith("/"):
        value += "/"
    return value


_EXTRACTORS: dict[str, Callable[[str], str]] = {
    "ProjectName": _raw_value,
    "OutputName": _raw_value,
    "SourcePath": _source_value,
    "HeadersPath": _headers_value,
    "LibPath": _lib_path_value,
    "LibNames": _compact_value,
}

_CORRUPT_MESSAGE = "The file '.confg.kslibs' is corrupt or empty. You should create a new one."


def parse_config(text: str) -> ProjectConfig:
    """Parse the text of a project file.

    Paths lose their spaces and a trailing ``;``; directories get a
    trailing ``/``. A missing or empty setting raises :class:`ConfigError`.
    """
    values: dict[str, str] = {}
    for line in text.split("\n"):
        for key, extract in _EXTRACTORS.items():
            if f"{key}: " in line:
                values[key] = extract(line)
    missing = [key for key in KEYS if not values.get(key)]
    if missing:
        raise ConfigError(f"{_CORRUPT_MESSAGE} Missing: {', '.join(missing)}")
    return ProjectConfig(
        project_name=values["ProjectName"],
        output_name=values["OutputName"],
        source_path=values["SourcePath"],
        headers_path=values["HeadersPath"],
        lib_path=values["LibPath"],
        lib_names=values["LibNames"],
    )


def load_config(path: PathLike) -> ProjectConfig:
    """Read and parse the project file at ``path``."""
    return parse_config(Path(path).read_text(encoding="utf-8"))


def save_config(path: PathLike, config: ProjectConfig) -> None:
    """Replace the project file at ``path`` with ``config``."""
    Path(path).write_text(config.to_text(), encoding="utf-8")


def _first_token(reply: str) -> str:
    words = reply.split()
    return words[0] if words else ""


def create_config(path: PathLike, prompt: Prompt = input) -> ProjectConfig:
    """Ask for every setting, write a new project file and parse it back."""
    ask = lambda text: prompt(styled(Fg.CYAN, text))  # noqa: E731
    answers = ProjectConfig(
        project_name=ask("Insert the name of the project: "),
        output_name=ask("Insert the name and path of the output file (Ex. folder/exec ): "),
        source_path=_first_token(
            ask("Insert the path of the source files (Ex: .) (Ex: src/;fs/main.cpp): ")
        ),
        headers_path=_first_token(
            ask("Insert the path of the header files (Ex: .) (Ex: head/;fs/headf.h): ")
        ),
        lib_path=_first_token(
            ask(
                "Insert the path of the library (don't write the include/ or lib/ path)"
                "(Ex: ../extern/SFML/)(NULL): "
            )
        ),
        lib_names=ask(
            "Insert the name of the library/ies without the '-l'. Use the ';' as separtor \n"
            "(Ex for boost::thread: boost_thread ; boost_system)(NULL): "
        ),
    )
    save_config(path, answers)
    return load_config(path)


def obtain_config(
    path: PathLike = DEFAULT_CONFIG_PATH,
    prompt: Prompt = input,
    output: IO[str] | None = None,
) -> tuple[str, ProjectConfig] | None:
    """Load the project file, asking the user for another one when needed.

    Returns the path used and its settings, or ``None`` when the user
    chooses to exit.
    """
    out = sys.stdout if output is None else output
    try:
        return str(path), load_config(path)
    except FileNotFoundError:
        print_styled(
            Fg.CYAN,
            "In the current  directory doesn't exist a '.config.kslibs' file.\n",
            stream=out,
        )
    except ConfigError:
        print_styled(Fg.MAGENTA, _CORRUPT_MESSAGE, stream=out)

    question = styled(
        Fg.CYAN,
        "Enter the path to your '.config.kslibs' file \n"
        "or enter 'newkslibs' to create a new one or 'exit': ",
        stream=out,
    )
    while True:
        reply = _first_token(prompt(question))
        if reply == "exit":
            return None
        if reply == "newkslibs":
            print_styled(Style.REVERSED, Fg.RED, "WELCOME TO THE KSLIBS PROJECTS CREATOR", stream=out)
            try:
                return str(path), create_config(path, prompt)
            except ConfigError:
                print_styled(Fg.MAGENTA, _CORRUPT_MESSAGE, stream=out)
                continue
        try:
            return reply, load_config(reply)
        except (OSError, ConfigError):
            print_styled(Fg.MAGENTA, _CORRUPT_MESSAGE, stream=out)