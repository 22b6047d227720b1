"""Host events delivered to the client hook layer.

Rendering and audio handles (pose stacks, buffer sources, sound engines and
channels) belong to the host. They are carried as opaque values and handed to
the collaborator that owns them without inspection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias

from clienthooks.types import Hand, HitResult, ItemStack


@dataclass(frozen=True)
class Tick:
    """Client game tick."""


@dataclass(frozen=True)
class RenderTick:
    """Start of a rendered frame."""


@dataclass(frozen=True)
class WorldUnload:
    """The client world is being torn down."""


@dataclass(frozen=True)
class ChatMessage:
    text: str


@dataclass(frozen=True)
class DrawHighlight:
    transform: Any
    buffers: Any
    camera: Any
    hit: HitResult


@dataclass(frozen=True)
class RenderHeldItem:
    transform: Any
    buffers: Any
    light: int
    hand: Hand
    pitch: float
    equip_progress: float
    swing_progress: float
    stack: ItemStack


@dataclass(frozen=True)
class RenderItemInFrame:
    transform: Any
    buffers: Any
    frame: Any
    stack: ItemStack
    light: int


@dataclass(frozen=True)
class PlayAudioStream:
    engine: Any
    channel: Any
    stream: Any


HostEvent: TypeAlias = (
    Tick
    | RenderTick
    | WorldUnload
    | ChatMessage
    | DrawHighlight
    | RenderHeldItem
    | RenderItemInFrame
    | PlayAudioStream
)
