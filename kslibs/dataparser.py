"""Parsing of the library listing: ``-|- ... -/-`` sections holding ``libName:`` entries."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

_OPEN = "-|-"
_CLOSE = "-/-"
_LIB_TAG = "libName:"
LIB_KEY = "libName"


def section_spans(content: str) -> list[tuple[int, int]]:
    """Return ``(start, end)`` for every closed section in ``content``.

    ``content[start:end]`` runs from the opening marker through the
    closing marker. A section left open at the end is not reported.
    """
    spans: list[tuple[int, int]] = []
    opened: int | None = None
    i = 0
    while i < len(content):
        if opened is None and content.startswith(_OPEN, i):
            opened = i
            i += len(_OPEN)
            continue
        if opened is not None and content.startswith(_CLOSE, i):
            spans.append((opened, i + len(_CLOSE)))
            opened = None
            i += len(_CLOSE)
            continue
        i += 1
    return spans


def _names_before(content: str, limit: int) -> Iterator[str]:
    """Yield the value of every ``libName:`` tag starting before ``limit``."""
    position = 0
    while True:
        found = content.find(_LIB_TAG, position)
        if found == -1 or found >= limit:
            return
        after = found + len(_LIB_TAG)
        if content.startswith(" ", after):
            yield content[after + 1 :].split(";", 1)[0]
        else:
            yield ""
        position = after + 1


def parse_data_lib(content: str) -> dict[str, str]:
    """Collect library names from the sections of ``content``.

    Each closed section makes every ``libName:`` tag before its closing
    marker count. A name is kept only when it is not already part of the
    collected text; kept names are joined with trailing spaces.
    """
    data: dict[str, str] = {}
    for _start, end in section_spans(content):
        for name in _names_before(content, end - 1):
            current = data.setdefault(LIB_KEY, "")
            if name not in current:
                data[LIB_KEY] = current + name + " "
    return data


def lib_names(content: str) -> list[str]:
    """Return the library names listed in ``content``, in order."""
    return parse_data_lib(content).get(LIB_KEY, "").split()


def format_data_lib(data_lib: Mapping[str, str]) -> str:
    """Render parsed data as a ``dataLib:`` listing, keys sorted."""
    body = "".join(f"{key}\t{value}" for key, value in sorted(data_lib.items()))
    return "dataLib:\n" + body