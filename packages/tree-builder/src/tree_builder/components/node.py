from collections.abc import Iterator
from enum import StrEnum
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from tree_builder.errors import MalformedEntryError


class ImageFormat(StrEnum):
    JPG = "jpg"
    PNG = "png"


class Tree(BaseModel):
    """One directory of the scanned hierarchy.

    ``items`` holds the images found directly in ``location`` with their
    extension removed, ``children`` one node per subdirectory. Both keep the
    order in which the directory was listed.
    """

    model_config = ConfigDict(frozen=True)

    location: Path
    items: List[Path] = Field(default_factory=list)
    children: List["Tree"] = Field(default_factory=list)

    @property
    def section(self) -> str:
        """Base name of the directory, used as its section title."""
        name = self.location.name
        if not name:
            raise MalformedEntryError(self.location, "directory has no base name")
        return name

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def walk(self) -> Iterator["Tree"]:
        """Yield this node and every descendant, parents before children."""
        yield self
        for child in self.children:
            yield from child.walk()
