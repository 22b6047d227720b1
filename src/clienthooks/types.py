"""Framework-neutral value types shared by the hook layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias


class HitKind(str, Enum):
    MISS = "miss"
    BLOCK = "block"
    ENTITY = "entity"


class Hand(str, Enum):
    MAIN_HAND = "main_hand"
    OFF_HAND = "off_hand"


class TurtleSide(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class ItemKind(str, Enum):
    POCKET_COMPUTER = "pocket_computer"
    PRINTOUT = "printout"
    OTHER = "other"


@dataclass(frozen=True)
class BlockPos:
    x: int
    y: int
    z: int


@dataclass(frozen=True)
class HitResult:
    """What the crosshair currently points at."""

    kind: HitKind
    pos: BlockPos | None = None


@dataclass(frozen=True)
class ItemStack:
    kind: ItemKind
    item_id: str = ""
    count: int = 1


@dataclass(frozen=True)
class TurtleUpgrade:
    upgrade_id: str


@dataclass(frozen=True)
class MonitorTarget:
    x_index: int
    y_index: int
    width: int
    height: int


@dataclass(frozen=True)
class TurtleTarget:
    computer_id: int
    left: TurtleUpgrade | None = None
    right: TurtleUpgrade | None = None

    def upgrade(self, side: TurtleSide) -> TurtleUpgrade | None:
        return self.left if side is TurtleSide.LEFT else self.right


@dataclass(frozen=True)
class OtherTarget:
    kind: str = "block"


TargetedObject: TypeAlias = MonitorTarget | TurtleTarget | OtherTarget
