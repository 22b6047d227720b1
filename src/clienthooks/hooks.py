"""Client event dispatcher.

The host calls one entry point per event (or ``dispatch`` with the event
object) and uses the returned flag to decide whether to skip its own default
handling. No entry point raises for bad input or a missing collaborator; both
simply mean "not handled".
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, assert_never

import pluggy
from loguru import logger

from clienthooks.config import ClientHooksSettings, get_settings
from clienthooks.debug import DebugAggregator, DebugEmit, HostView
from clienthooks.errors import CollaboratorUnavailableError, ConfigurationError
from clienthooks.events import (
    ChatMessage,
    DrawHighlight,
    HostEvent,
    PlayAudioStream,
    RenderHeldItem,
    RenderItemInFrame,
    RenderTick,
    Tick,
    WorldUnload,
)
from clienthooks.hook_runtime import HookRuntime
from clienthooks.hookspecs import CLIENTHOOKS_NAMESPACE, ClientHookSpecs
from clienthooks.interceptor import CommandInterceptor
from clienthooks.opener import PathOpener
from clienthooks.session import ClientSession
from clienthooks.timing import FrameInfo, PauseAwareTimer
from clienthooks.types import ItemKind


class ClientHooks:
    """Routes host events to the interceptor, debug overlay and renderer providers."""

    def __init__(
        self,
        host: HostView,
        *,
        settings: ClientHooksSettings | None = None,
        opener: Callable[[Path], object] | None = None,
        frame_info: FrameInfo | None = None,
        timer: PauseAwareTimer | None = None,
        session: ClientSession | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.highlight_order = _validated_order(self.settings.highlight_order)
        self.host = host
        self.frame_info = frame_info or FrameInfo()
        self.timer = timer or PauseAwareTimer()
        self.session = session
        self._plugin_manager = pluggy.PluginManager(CLIENTHOOKS_NAMESPACE)
        self._plugin_manager.add_hookspecs(ClientHookSpecs)
        self._hook_runtime = HookRuntime(self._plugin_manager)
        self.interceptor = CommandInterceptor(self._storage_root, opener or PathOpener(self.settings.open_command))
        self.debug = DebugAggregator(host)

    def register_renderer(self, plugin: Any, name: str) -> None:
        """Register a renderer provider under ``name``."""

        self._plugin_manager.register(plugin, name=name)
        logger.debug("hooks.renderer_registered name={}", name)

    def unregister_renderer(self, name: str) -> None:
        self._plugin_manager.unregister(name=name)

    def hook_report(self) -> dict[str, list[str]]:
        """Return hook implementation summary for diagnostics."""

        return self._hook_runtime.hook_report()

    def dispatch(self, event: HostEvent) -> bool | None:
        match event:
            case Tick():
                return self.on_tick()
            case RenderTick():
                return self.on_render_tick()
            case WorldUnload():
                return self.on_world_unload()
            case ChatMessage(text=text):
                return self.on_chat_message(text)
            case DrawHighlight():
                return self.draw_highlight(event)
            case RenderHeldItem():
                return self.on_render_held_item(event)
            case RenderItemInFrame():
                return self.on_render_item_frame(event)
            case PlayAudioStream():
                return self.on_play_streaming(event)
            case _:
                assert_never(event)

    def on_tick(self) -> None:
        self.frame_info.on_tick()

    def on_render_tick(self) -> None:
        self.timer.tick(self.host.paused)
        self.frame_info.on_render_tick()

    def on_world_load(self, session: ClientSession) -> None:
        if self.session is not None:
            self.on_world_unload()
        self.session = session
        logger.info("hooks.world_load storage_root={}", session.storage_root)

    def on_world_unload(self) -> None:
        session, self.session = self.session, None
        if session is None:
            return
        failed = session.reset(on_failure=self._report_reset_failure)
        if failed:
            logger.warning("hooks.world_unload_incomplete failed={}", ",".join(failed))
        else:
            logger.info("hooks.world_unload")

    def on_chat_message(self, text: str) -> bool:
        return self.interceptor.try_handle(text)

    def draw_highlight(self, event: DrawHighlight) -> bool:
        provider = self._hook_runtime.claim_sync("draw_highlight", order=self.highlight_order, event=event)
        return provider is not None

    def on_render_held_item(self, event: RenderHeldItem) -> bool:
        match event.stack.kind:
            case ItemKind.POCKET_COMPUTER:
                return self._render("render_pocket_item", event)
            case ItemKind.PRINTOUT:
                return self._render("render_printout_item", event)
            case _:
                return False

    def on_render_item_frame(self, event: RenderItemInFrame) -> bool:
        if event.stack.kind is not ItemKind.PRINTOUT:
            return False
        return self._render("render_printout_in_frame", event)

    def on_play_streaming(self, event: PlayAudioStream) -> None:
        try:
            session = self._require_session("speakers")
        except CollaboratorUnavailableError as exc:
            logger.debug("hooks.audio_dropped reason={}", exc)
            return
        session.speakers.on_play_streaming(event.engine, event.channel, event.stream)

    def add_debug_info(self, emit: DebugEmit) -> None:
        self.debug.collect(emit)

    def _render(self, hook_name: str, event: RenderHeldItem | RenderItemInFrame) -> bool:
        try:
            self._require_renderer(hook_name)
        except CollaboratorUnavailableError as exc:
            logger.debug("hooks.render_skipped hook={} reason={}", hook_name, exc)
            return False
        return self._hook_runtime.claim_sync(hook_name, event=event) is not None

    def _require_session(self, collaborator: str) -> ClientSession:
        if self.session is None:
            raise CollaboratorUnavailableError(collaborator)
        return self.session

    def _require_renderer(self, hook_name: str) -> None:
        if not self._hook_runtime.has_impl(hook_name):
            raise CollaboratorUnavailableError(hook_name)

    def _report_reset_failure(self, registry: str, error: Exception) -> None:
        self._hook_runtime.notify_error_sync(stage=f"world_unload:{registry}", error=error, event=WorldUnload())

    def _storage_root(self) -> Path | None:
        if self.session is None:
            return None
        return self.session.storage_root


def _validated_order(order: tuple[str, ...]) -> tuple[str, ...]:
    if len(set(order)) != len(order):
        raise ConfigurationError(f"highlight_order lists a provider twice: {order}")
    return tuple(order)
