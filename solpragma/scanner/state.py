"""Scanner state: a tag plus a brace depth that only matters inside a block."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StateTag(Enum):
    TOP_LEVEL = "top_level"
    PRAGMA_SEEN = "pragma_seen"
    PRAGMA_SOLIDITY_TARGETED = "pragma_solidity_targeted"
    SKIPPING_STATEMENT = "skipping_statement"
    IN_BLOCK = "in_block"


@dataclass(frozen=True)
class ScanState:
    """Current scanner state.

    ``depth`` counts unmatched ``{`` and is always >= 1 for IN_BLOCK and 0
    for every other tag.
    """

    tag: StateTag
    depth: int = 0

    def __post_init__(self) -> None:
        if self.tag is StateTag.IN_BLOCK:
            if self.depth < 1:
                raise ValueError(f"in-block state needs depth >= 1, got {self.depth}")
        elif self.depth != 0:
            raise ValueError(f"{self.tag.value} state carries no depth, got {self.depth}")

    @classmethod
    def in_block(cls, depth: int) -> ScanState:
        return cls(StateTag.IN_BLOCK, depth)


TOP_LEVEL = ScanState(StateTag.TOP_LEVEL)
PRAGMA_SEEN = ScanState(StateTag.PRAGMA_SEEN)
PRAGMA_SOLIDITY_TARGETED = ScanState(StateTag.PRAGMA_SOLIDITY_TARGETED)
SKIPPING_STATEMENT = ScanState(StateTag.SKIPPING_STATEMENT)
