from __future__ import annotations

from clienthooks.debug import DebugAggregator
from clienthooks.host import StaticHost, StaticWorld
from clienthooks.types import (
    BlockPos,
    HitKind,
    HitResult,
    MonitorTarget,
    OtherTarget,
    TurtleTarget,
    TurtleUpgrade,
)

POS = BlockPos(10, 64, -3)


def _collect(host: StaticHost) -> list[str]:
    lines: list[str] = []
    DebugAggregator(host).collect(lines.append)
    return lines


def _targeting(obj) -> StaticHost:
    world = StaticWorld()
    world.target(POS, obj)
    return StaticHost(debug_overlay=True, world=world)


def test_monitor_lines() -> None:
    host = _targeting(MonitorTarget(x_index=1, y_index=0, width=3, height=2))

    assert _collect(host) == ["", "Targeted monitor: (1, 0), 3 x 2"]


def test_turtle_with_left_upgrade_only() -> None:
    host = _targeting(TurtleTarget(computer_id=7, left=TurtleUpgrade("speaker")))

    assert _collect(host) == ["", "Targeted turtle:", "Id: 7", "Upgrade[LEFT]: speaker"]


def test_turtle_upgrades_are_listed_left_then_right() -> None:
    host = _targeting(
        TurtleTarget(computer_id=3, left=TurtleUpgrade("minecraft:diamond_pickaxe"), right=TurtleUpgrade("modem"))
    )

    assert _collect(host) == [
        "",
        "Targeted turtle:",
        "Id: 3",
        "Upgrade[LEFT]: minecraft:diamond_pickaxe",
        "Upgrade[RIGHT]: modem",
    ]


def test_turtle_without_upgrades() -> None:
    host = _targeting(TurtleTarget(computer_id=0))

    assert _collect(host) == ["", "Targeted turtle:", "Id: 0"]


def test_other_block_emits_nothing() -> None:
    assert _collect(_targeting(OtherTarget("furnace"))) == []


def test_empty_block_emits_nothing() -> None:
    world = StaticWorld()
    world.target(POS)

    assert _collect(StaticHost(debug_overlay=True, world=world)) == []


def test_non_block_hit_emits_nothing() -> None:
    world = StaticWorld(hit_result=HitResult(kind=HitKind.ENTITY, pos=POS), objects={POS: TurtleTarget(1)})

    assert _collect(StaticHost(debug_overlay=True, world=world)) == []


def test_no_hit_emits_nothing() -> None:
    assert _collect(StaticHost(debug_overlay=True, world=StaticWorld())) == []


def test_overlay_disabled_or_no_world_emits_nothing() -> None:
    host = _targeting(TurtleTarget(1))
    host.debug_overlay = False

    assert _collect(host) == []
    assert _collect(StaticHost(debug_overlay=True, world=None)) == []


def test_target_is_looked_up_on_every_call() -> None:
    host = _targeting(MonitorTarget(0, 0, 1, 1))
    aggregator = DebugAggregator(host)

    first: list[str] = []
    aggregator.collect(first.append)
    host.world.objects[POS] = TurtleTarget(9)
    second: list[str] = []
    aggregator.collect(second.append)

    assert first == ["", "Targeted monitor: (0, 0), 1 x 1"]
    assert second == ["", "Targeted turtle:", "Id: 9"]
