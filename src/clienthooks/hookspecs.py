"""Pluggy hook namespace and renderer hook specifications."""

from __future__ import annotations

import pluggy

from clienthooks.events import DrawHighlight, HostEvent, RenderHeldItem, RenderItemInFrame

CLIENTHOOKS_NAMESPACE = "clienthooks"
hookspec = pluggy.HookspecMarker(CLIENTHOOKS_NAMESPACE)
hookimpl = pluggy.HookimplMarker(CLIENTHOOKS_NAMESPACE)


class ClientHookSpecs:
    """Hook contract for renderer providers.

    Every rendering hook returns ``True`` once it has drawn something. Any
    other result, or an exception, leaves the event to the next provider.
    """

    @hookspec
    def draw_highlight(self, event: DrawHighlight) -> bool | None:
        """Draw the outline of the block under the crosshair."""

    @hookspec
    def render_pocket_item(self, event: RenderHeldItem) -> bool | None:
        """Render a held pocket computer in first person."""

    @hookspec
    def render_printout_item(self, event: RenderHeldItem) -> bool | None:
        """Render a held printout in first person."""

    @hookspec
    def render_printout_in_frame(self, event: RenderItemInFrame) -> bool | None:
        """Render a printout placed in an item frame."""

    @hookspec
    def on_error(self, stage: str, error: Exception, event: HostEvent | None) -> None:
        """Observe renderer failures."""
