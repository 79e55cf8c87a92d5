from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class PartReference:
    id: int
    name: str


@dataclass(frozen=True)
class Page:
    id: int
    page: int  # printed page number
    content: str  # ketabonline page HTML
    index: int  # owning index entry id
    part: Optional[PartReference] = None


@dataclass
class IndexItem:
    id: int
    title: str
    page: int
    title_level: int = 1
    part_name: Optional[str] = None
    children: List["IndexItem"] = dataclasses.field(default_factory=list)
    page_id: Optional[int] = None
    parent: Optional[int] = None


@dataclass(frozen=True)
class Footnote:
    number: int
    text: str


@dataclass(frozen=True)
class UnzippedEntry:
    name: str
    data: bytes
