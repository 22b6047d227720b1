"""Hook execution runtime with per-provider fault isolation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pluggy
from loguru import logger

from clienthooks.events import HostEvent


class HookRuntime:
    """Safe wrapper around pluggy hook execution."""

    def __init__(self, plugin_manager: pluggy.PluginManager) -> None:
        self._plugin_manager = plugin_manager

    def has_impl(self, hook_name: str) -> bool:
        return bool(self._iter_hookimpls(hook_name))

    def claim_sync(self, hook_name: str, *, order: Sequence[str] = (), **kwargs: Any) -> str | None:
        """Offer the call to providers in turn and return the name of the first that claims it.

        Providers named in ``order`` go first, in that order; the rest follow in
        pluggy precedence. A provider claims the call by returning a truthy value.
        """

        for impl in self._iter_hookimpls(hook_name, order):
            call_kwargs = self._kwargs_for_impl(impl, kwargs)
            value = self._invoke_impl_sync(hook_name=hook_name, impl=impl, call_kwargs=call_kwargs, kwargs=kwargs)
            if value is _SKIP_VALUE:
                continue
            if value:
                return impl.plugin_name or "<unknown>"
        return None

    def notify_error_sync(self, *, stage: str, error: Exception, event: HostEvent | None) -> None:
        """Call on_error hooks, swallowing observer failures."""

        for impl in self._iter_hookimpls("on_error"):
            call_kwargs = self._kwargs_for_impl(impl, {"stage": stage, "error": error, "event": event})
            try:
                impl.function(**call_kwargs)
            except Exception:
                logger.opt(exception=True).warning(
                    "hook.on_error_failed stage={} provider={}",
                    stage,
                    impl.plugin_name or "<unknown>",
                )

    def hook_report(self) -> dict[str, list[str]]:
        """Build a hook->providers mapping for diagnostics."""

        report: dict[str, list[str]] = {}
        for hook_name, hook_caller in sorted(self._plugin_manager.hook.__dict__.items()):
            if hook_name.startswith("_") or not hasattr(hook_caller, "get_hookimpls"):
                continue
            provider_names = [impl.plugin_name for impl in reversed(hook_caller.get_hookimpls())]
            if provider_names:
                report[hook_name] = provider_names
        return report

    def _invoke_impl_sync(
        self,
        *,
        hook_name: str,
        impl: Any,
        call_kwargs: dict[str, Any],
        kwargs: dict[str, Any],
    ) -> Any:
        try:
            return impl.function(**call_kwargs)
        except Exception as error:
            logger.opt(exception=True).warning(
                "hook.provider_failed hook={} provider={}",
                hook_name,
                impl.plugin_name or "<unknown>",
            )
            self.notify_error_sync(
                stage=f"{hook_name}:{impl.plugin_name or '<unknown>'}",
                error=error,
                event=kwargs.get("event"),
            )
            return _SKIP_VALUE

    def _iter_hookimpls(self, hook_name: str, order: Sequence[str] = ()) -> list[Any]:
        hook = getattr(self._plugin_manager.hook, hook_name, None)
        if hook is None or not hasattr(hook, "get_hookimpls"):
            return []
        impls = list(reversed(hook.get_hookimpls()))
        if order:
            rank = {name: index for index, name in enumerate(order)}
            impls.sort(key=lambda impl: rank.get(impl.plugin_name, len(rank)))
        return impls

    @staticmethod
    def _kwargs_for_impl(impl: Any, kwargs: dict[str, Any]) -> dict[str, Any]:
        return {name: kwargs[name] for name in impl.argnames if name in kwargs}


_SKIP_VALUE = object()
