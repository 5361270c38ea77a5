"""External tools that can be started on a selected video."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_NEW_ITEM_BASE = "New Item"
_DEFAULT_ARGUMENT = '"${filefullpath}"'

_ARGUMENT_TARGETS = (
    "appfullpath",
    "appdirectoryfullpath",
    "filefullpath",
    "directoryfullpath",
    "filefullpathwithoutextension",
    "filename",
    "filenamewithoutextension",
)


def argument_placeholders() -> list[str]:
    """Return the placeholders usable in a tool's executable or arguments."""
    return ["${" + target + "}" for target in _ARGUMENT_TARGETS]


@dataclass
class ExternalTool:
    """A program the user can launch on a video."""

    name: str
    exe: str = ""
    arg: str = _DEFAULT_ARGUMENT
    count_as_open: bool = False


class ExternalToolList:
    """An ordered, editable list of external tools."""

    def __init__(self, tools: Iterable[ExternalTool] = ()) -> None:
        self._tools: list[ExternalTool] = list(tools)

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[ExternalTool]:
        return iter(self._tools)

    def __getitem__(self, index: int) -> ExternalTool:
        return self._tools[index]

    @property
    def names(self) -> list[str]:
        """Names of the tools in order."""
        return [tool.name for tool in self._tools]

    def has_name(self, name: str) -> bool:
        """Return True if a tool called *name* is in the list."""
        return any(tool.name == name for tool in self._tools)

    def add_new(self) -> ExternalTool:
        """Append a tool with the first free "New Item N" name and return it."""
        number = 1
        while self.has_name(f"{_NEW_ITEM_BASE} {number}"):
            number += 1
        tool = ExternalTool(f"{_NEW_ITEM_BASE} {number}", "", _DEFAULT_ARGUMENT, False)
        self._tools.append(tool)
        return tool

    def remove(self, index: int) -> ExternalTool:
        """Remove and return the tool at *index*; raises IndexError if there is none."""
        if not 0 <= index < len(self._tools):
            raise IndexError(f"no tool at index {index}")
        return self._tools.pop(index)

    def move_up(self, index: int) -> int:
        """Move the tool at *index* one place up and return its new index."""
        if index <= 0 or index >= len(self._tools):
            return index
        tool = self._tools.pop(index)
        self._tools.insert(index - 1, tool)
        return index - 1

    def move_down(self, index: int) -> int:
        """Move the tool at *index* one place down and return its new index."""
        if index < 0 or index + 1 >= len(self._tools):
            return index
        tool = self._tools.pop(index)
        self._tools.insert(index + 1, tool)
        return index + 1