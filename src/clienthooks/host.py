"""In-memory host and world views for driving the hooks outside a game client."""

from __future__ import annotations

from dataclasses import dataclass, field

from clienthooks.types import BlockPos, HitKind, HitResult, TargetedObject


@dataclass
class StaticWorld:
    """A world made of the objects placed in it, with a fixed crosshair target."""

    hit_result: HitResult | None = None
    objects: dict[BlockPos, TargetedObject] = field(default_factory=dict)

    def object_at(self, pos: BlockPos) -> TargetedObject | None:
        return self.objects.get(pos)

    def target(self, pos: BlockPos, obj: TargetedObject | None = None) -> None:
        """Point the crosshair at ``pos``, optionally placing ``obj`` there first."""

        if obj is not None:
            self.objects[pos] = obj
        self.hit_result = HitResult(kind=HitKind.BLOCK, pos=pos)


@dataclass
class StaticHost:
    paused: bool = False
    debug_overlay: bool = False
    world: StaticWorld | None = None
