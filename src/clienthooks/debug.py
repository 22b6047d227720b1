"""Extra lines for the host's debug overlay describing the targeted block."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from clienthooks.types import (
    BlockPos,
    HitKind,
    HitResult,
    MonitorTarget,
    TargetedObject,
    TurtleSide,
    TurtleTarget,
)

DebugEmit = Callable[[str], None]


class WorldView(Protocol):
    """Read access to the loaded client world."""

    @property
    def hit_result(self) -> HitResult | None: ...

    def object_at(self, pos: BlockPos) -> TargetedObject | None: ...


class HostView(Protocol):
    """The parts of the host application the hook layer reads."""

    @property
    def paused(self) -> bool: ...

    @property
    def debug_overlay(self) -> bool: ...

    @property
    def world(self) -> WorldView | None: ...


class DebugAggregator:
    def __init__(self, host: HostView) -> None:
        self._host = host

    def collect(self, emit: DebugEmit) -> None:
        """Emit lines describing the monitor or turtle under the crosshair."""

        world = self._host.world
        if not self._host.debug_overlay or world is None:
            return

        hit = world.hit_result
        if hit is None or hit.kind is not HitKind.BLOCK or hit.pos is None:
            return

        target = world.object_at(hit.pos)
        match target:
            case MonitorTarget():
                emit("")
                emit(f"Targeted monitor: ({target.x_index}, {target.y_index}), {target.width} x {target.height}")
            case TurtleTarget():
                emit("")
                emit("Targeted turtle:")
                emit(f"Id: {target.computer_id}")
                for side in (TurtleSide.LEFT, TurtleSide.RIGHT):
                    _emit_upgrade(emit, target, side)
            case _:
                return


def _emit_upgrade(emit: DebugEmit, turtle: TurtleTarget, side: TurtleSide) -> None:
    upgrade = turtle.upgrade(side)
    if upgrade is not None:
        emit(f"Upgrade[{side.name}]: {upgrade.upgrade_id}")
