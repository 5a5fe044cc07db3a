"""Assembly of the compiler command line for a project."""

from __future__ import annotations

import re

from kslibs.config import ProjectConfig

WARNING_FLAGS = (
    " -O2 -Wall -Wregister -std=c++17 -g -Wall -Wdisabled-optimization"
    " -Wuninitialized -Wextra"
)

_HEADER_EXTENSION = re.compile(r"\.hpp|\.h")
_SPACE_RUN = re.compile(" {2,}")


def expand_sources(source_path: str) -> list[str]:
    """Turn a ``;``-separated source setting into compiler inputs.

    Entries that do not name a ``.cpp`` file get ``*.cpp`` appended;
    the setting ``.`` stands for itself.
    """
    if source_path == ".":
        return ["."]
    return [
        entry + "*.cpp" if entry and ".cpp" not in entry else entry
        for entry in source_path.split(";")
    ]


def include_dirs(headers_path: str) -> str:
    """Return the include-flag text made from a ``;``-separated headers setting.

    Header file extensions and wildcards become blanks, every ``;`` starts
    a new ``-I`` flag, and ``.`` and ``h`` characters are dropped. The
    setting ``.`` yields nothing.
    """
    if headers_path == ".":
        return ""
    entries = headers_path.split(";")
    first = entries[0]
    if first and ".h" not in first:
        entries[0] = first + "*.h"
    text = ";".join(entries) + ";"
    text = _HEADER_EXTENSION.sub(lambda match: " " * len(match.group()), text)
    text = text[:1] + text[1:].replace("*", " ")
    pieces = []
    for char in text:
        if char == ";":
            pieces.append(" -I")
        elif char not in ".h":
            pieces.append(char)
    return "".join(pieces)


def _squeeze_after_output(cmd: str) -> str:
    """Collapse runs of spaces that follow the quoted output name."""
    first = cmd.find('"')
    second = cmd.find('"', first + 1) if first != -1 else -1
    if second == -1:
        return cmd
    return cmd[: second + 1] + _SPACE_RUN.sub(" ", cmd[second + 1 :])


def build_command(config: ProjectConfig) -> str:
    """Return the ``g++`` command line that builds the project."""
    cmd = f'g++ -o "{config.output_name}" '
    if config.source_path != ".":
        cmd += "".join(f"{entry} " for entry in expand_sources(config.source_path))
    else:
        cmd += "."

    if cmd[-3] not in (" ", "-") and cmd[-1] != "I":
        cmd += " -I"
    cmd += include_dirs(config.headers_path) + " "
    # An -I flag with nothing after it is dropped.
    cmd = cmd.replace("-I ", "   ")

    if config.lib_path != "NULL/":
        cmd += f" -I{config.lib_path}include -L{config.lib_path}lib -l"
    if config.lib_names != "NULL":
        cmd += " -l" + config.lib_names.replace(";", " -l")
    else:
        cmd += " "

    return _squeeze_after_output(cmd) + WARNING_FLAGS