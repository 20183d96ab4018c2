"""Connectivity probe.

``ConnectionProbe.test_connection`` sends one fixed, tiny request through
the same provider path the dispatcher uses and reports the outcome as a
``ConnectionResult`` value. It is an error-reporting tool, so no failure
(configuration, availability, upstream, transport) escapes as an exception.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..base.cancellation import CancellationToken
from ..base.errors import DispatchError
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import ConnectionResult, GenerationRequest, ProviderId
from ..base.registry import ProviderRegistry
from ..config.defaults import PROBE_MAX_TOKENS, PROBE_PROMPT
from ..config.resolver import ConfigResolver

PROBE_REQUEST = GenerationRequest(prompt=PROBE_PROMPT, max_tokens=PROBE_MAX_TOKENS)


class ConnectionProbe:
    """Non-throwing provider connectivity check.

    Parameters
    ----------
    registry:
        Provider registry shared with the dispatcher.
    resolver:
        Per-user configuration resolver.
    """

    def __init__(self, registry: ProviderRegistry, resolver: ConfigResolver) -> None:
        self._registry = registry
        self._resolver = resolver
        self._logger = get_logger("jobhunter.probe")

    async def test_connection(
        self,
        user_id: str,
        provider_override: "str | ProviderId | None" = None,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> ConnectionResult:
        """Probe ``provider_override`` (or the active provider) for ``user_id``."""
        try:
            config = self._resolver.get_effective_config(user_id)
            target = str(provider_override or config.active_provider)
            provider = self._registry.resolve(target)
        except DispatchError as exc:
            return self._report(user_id, None, ConnectionResult(False, exc.message))
        except Exception as exc:
            return self._report(user_id, None, ConnectionResult(False, f"Connection failed: {exc}"))

        if not provider.is_available(config):
            return self._report(
                user_id, target, ConnectionResult(False, f'Provider "{target}" is not configured.')
            )
        try:
            result = await provider.generate(PROBE_REQUEST, config, cancel=cancel)
        except Exception as exc:
            return self._report(user_id, target, ConnectionResult(False, f"Connection failed: {exc}"))
        return self._report(
            user_id, target, ConnectionResult(True, f"Connected to {target} ({result.model_id})")
        )

    def _report(self, user_id: str, target: Optional[str], result: ConnectionResult) -> ConnectionResult:
        log_event(
            self._logger,
            "probe.result",
            LogContext(provider=target, user_id=user_id),
            level=logging.INFO if result.success else logging.WARNING,
            success=result.success,
            detail=result.message,
        )
        return result


__all__ = ["ConnectionProbe", "PROBE_REQUEST"]
