"""Application mode as a tagged union.

``PreviewMode`` always carries its document, so a preview without a document
cannot be represented. Explorer state lives on the application and survives
while a preview is open.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..preview import PreviewDocument


@dataclass(frozen=True)
class ExplorerMode:
    pass


@dataclass(frozen=True)
class PreviewMode:
    document: PreviewDocument


Mode = Union[ExplorerMode, PreviewMode]
