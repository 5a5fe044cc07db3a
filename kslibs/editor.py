"""Interactive editing of the settings held in a project file."""

from __future__ import annotations

import re
import sys
from dataclasses import replace
from typing import IO

from kslibs.config import PathLike, ProjectConfig, Prompt, save_config

FINISH_CHOICE = 255

_FIELDS: dict[int, tuple[str, str]] = {
    1: ("project_name", "Project Name"),
    2: ("output_name", "Output Name"),
    3: ("source_path", "Source Path"),
    4: ("headers_path", "Headers Path"),
    5: ("lib_path", "Lib Path"),
    6: ("lib_names", "Lib Names"),
}

_MENU_PROMPT = f'\nInsert the number of the value to modify (type "{FINISH_CHOICE}" to finish): '
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_choice(reply: str) -> int:
    """Read the leading integer of ``reply``; anything else selects nothing."""
    match = _LEADING_INT.match(reply)
    return int(match.group(1)) if match else 0


class ConfigEditor:
    """Lets the user change the settings of a project one by one."""

    def __init__(
        self,
        config: ProjectConfig,
        path: PathLike,
        prompt: Prompt = input,
        output: IO[str] | None = None,
    ) -> None:
        self.config = config
        self.path = path
        self._prompt = prompt
        self._output = sys.stdout if output is None else output

    def render(self) -> str:
        """Return the numbered listing of the current settings."""
        values = self.config.as_dict()
        keys = list(values)
        return "".join(
            f"\n{number}- {label}: {values[keys[number - 1]]}"
            for number, (_attr, label) in _FIELDS.items()
        )

    def run(self) -> ProjectConfig:
        """Ask for settings to change until the finish number, then save."""
        while True:
            choice = _parse_choice(self._prompt(_MENU_PROMPT))
            field = _FIELDS.get(choice)
            if field is not None:
                attr, label = field
                value = self._prompt(f"Insert the new value for the {label}: ")
                self.config = replace(self.config, **{attr: value})
            self._output.write(self.render())
            if choice == FINISH_CHOICE:
                break
        self.save()
        return self.config

    def save(self) -> None:
        """Write the current settings to the project file."""
        save_config(self.path, self.config)