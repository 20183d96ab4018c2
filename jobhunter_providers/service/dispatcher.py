"""Generation dispatcher.

Composes the config resolver, the provider registry and the prompt builders
to execute one generation for a user:

1. resolve the ``EffectiveConfig`` (``NotConfiguredError`` if absent);
2. resolve the adapter for ``active_provider`` (``UnknownProviderError``);
3. refuse unavailable providers without any network call
   (``UnavailableError``);
4. call the adapter once, wrapping any failure as
   ``GenerationFailedError(provider_id, cause)``.

A single attempt is made per call; there is no retry or backoff. Caller
cancellation (``CancelledError``/``asyncio.CancelledError``) propagates
unwrapped.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..base.cancellation import CancellationToken, CancelledError
from ..base.errors import DispatchError, GenerationFailedError, ProfileNotFoundError, UnavailableError
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import CandidateProfile, GenerationRequest, GenerationResult, PromptPair
from ..base.registry import ProviderRegistry
from ..config.resolver import ConfigResolver
from ..persistence.interfaces.repos import IProfileRepo
from ..prompts import (
    SmartAnswerInput,
    build_answer_prompt,
    build_cover_letter_prompt,
    build_resume_optimization_prompt,
    build_smart_answer_prompt,
)


class GenerationDispatcher:
    """Execute generation requests against the user's active provider.

    Parameters
    ----------
    registry:
        Immutable provider registry built at startup.
    resolver:
        Per-user configuration resolver (re-reads on every call).
    profiles:
        Source of candidate profile documents for the task wrappers.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        resolver: ConfigResolver,
        profiles: IProfileRepo,
    ) -> None:
        self._registry = registry
        self._resolver = resolver
        self._profiles = profiles
        self._logger = get_logger("jobhunter.dispatcher")

    async def generate(
        self,
        user_id: str,
        request: GenerationRequest,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> GenerationResult:
        """Run ``request`` on the user's active provider.

        Raises
        ------
        NotConfiguredError, UnknownProviderError, UnavailableError
            Local configuration problems, raised before any network call.
        GenerationFailedError
            The provider call failed; ``cause`` holds the original error.
        CancelledError
            ``cancel`` fired while the request was in flight.
        """
        config = self._resolver.get_effective_config(user_id)
        provider = self._registry.resolve(config.active_provider)
        provider_id = provider.provider_id.value
        if not provider.is_available(config):
            raise UnavailableError(provider_id)
        if cancel is not None:
            cancel.raise_if_cancelled()
        try:
            return await provider.generate(request, config, cancel=cancel)
        except (CancelledError, DispatchError):
            raise
        except Exception as exc:
            log_event(
                self._logger,
                "dispatch.failed",
                LogContext(provider=provider_id, user_id=user_id),
                level=logging.WARNING,
                error=str(exc),
                error_code=getattr(getattr(exc, "code", None), "value", None),
            )
            raise GenerationFailedError(provider_id, exc) from exc

    def load_profile(self, user_id: str) -> CandidateProfile:
        """Return the user's profile projection or raise ``ProfileNotFoundError``."""
        document = self._profiles.get_document(user_id)
        if document is None:
            raise ProfileNotFoundError()
        return CandidateProfile.from_dict(document)

    async def _generate_prompt(
        self, user_id: str, prompt: PromptPair, cancel: Optional[CancellationToken]
    ) -> GenerationResult:
        return await self.generate(user_id, prompt.to_request(), cancel=cancel)

    async def generate_cover_letter(
        self, user_id: str, job_description: str, *, cancel: Optional[CancellationToken] = None
    ) -> GenerationResult:
        profile = self.load_profile(user_id)
        return await self._generate_prompt(
            user_id, build_cover_letter_prompt(profile, job_description), cancel
        )

    async def generate_answer(
        self,
        user_id: str,
        question: str,
        context: Optional[str] = None,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> GenerationResult:
        profile = self.load_profile(user_id)
        return await self._generate_prompt(
            user_id, build_answer_prompt(profile, question, context), cancel
        )

    async def generate_smart_answer(
        self, user_id: str, data: SmartAnswerInput, *, cancel: Optional[CancellationToken] = None
    ) -> GenerationResult:
        profile = self.load_profile(user_id)
        return await self._generate_prompt(user_id, build_smart_answer_prompt(profile, data), cancel)

    async def generate_resume_optimization(
        self, user_id: str, job_description: str, *, cancel: Optional[CancellationToken] = None
    ) -> GenerationResult:
        profile = self.load_profile(user_id)
        return await self._generate_prompt(
            user_id, build_resume_optimization_prompt(profile, job_description), cancel
        )


__all__ = ["GenerationDispatcher"]
