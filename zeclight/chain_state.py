"""The wallet's view of the recently scanned chain and its birthday."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from zeclight.config import LightClientConfig


@dataclass(frozen=True)
class BlockData:
    """A scanned block, identified by its height and hash."""

    height: int
    hash: str


@dataclass
class ChainState:
    """Recent blocks (highest first) and the block the wallet was born at."""

    config: LightClientConfig
    birthday: int = 0
    blocks: list[BlockData] = field(default_factory=list)

    def set_blocks(self, blocks: Iterable[BlockData]) -> None:
        """Replace the stored blocks; they must be ordered highest first."""
        self.blocks[:] = blocks

    def get_blocks(self) -> list[BlockData]:
        """Return a copy of the stored blocks, needed to handle reorgs."""
        return list(self.blocks)

    def clear(self) -> None:
        """Forget every scanned block; the wallet then needs a rescan."""
        self.blocks.clear()

    def set_initial_block(self, height: int, block_hash: str) -> bool:
        """Seed an empty chain with one block; return False if blocks already exist."""
        if self.blocks:
            return False
        self.blocks.append(BlockData(height, block_hash))
        return True

    def last_scanned_height(self) -> int:
        if self.blocks:
            return self.blocks[0].height
        return self.config.sapling_activation_height - 1

    def last_scanned_hash(self) -> str:
        return self.blocks[0].hash if self.blocks else ""

    def target_height(self) -> int | None:
        """Return the height a new transaction would be mined at, if any blocks are known."""
        return self.blocks[0].height + 1 if self.blocks else None

    def target_height_and_anchor_offset(self) -> tuple[int, int] | None:
        """Return the target height and how far back from it anchors are selected."""
        if not self.blocks:
            return None
        max_height = self.blocks[0].height
        min_height = self.blocks[-1].height
        target = max_height + 1
        # Go back the configured offset, but not before the earliest block held.
        anchor = max(max(target - self.config.anchor_offset[-1], 0), min_height)
        return target, target - anchor

    def anchor_height(self) -> int:
        """Return the height of the anchor block, or 0 with no blocks."""
        found = self.target_height_and_anchor_offset()
        if found is None:
            return 0
        target, offset = found
        return target - offset - 1

    def first_tx_block(self, tx_heights: Iterable[int]) -> int:
        """Return the earliest transaction height, else the recorded birthday or activation height."""
        earliest = min(tx_heights, default=None)
        if earliest is not None:
            return earliest
        return max(self.birthday, self.config.sapling_activation_height)

    def birthday_for(self, tx_heights: Iterable[int]) -> int:
        """Return the effective birthday given the heights of the wallet's transactions."""
        first = self.first_tx_block(tx_heights)
        if self.birthday == 0:
            return first
        return min(first, self.birthday)

    def adjust_birthday(self, new_birthday: int) -> None:
        """Move the birthday earlier, never before sapling activation."""
        if new_birthday < self.birthday:
            self.birthday = max(new_birthday, self.config.sapling_activation_height)