"""Request bodies and FastAPI dependencies for the AI routes.

Bodies are pydantic v2 models accepting the camelCase JSON used by the web
client and browser extension; bounds mirror the persisted config limits
(temperature in ``[0, 2]``, max tokens in ``[1, 8192]``).
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Optional

from fastapi import Depends, Header, Request
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ...base.errors import DispatchError, ErrorCode
from ...base.models import GenerationRequest, ProviderId
from ...config.defaults import MAX_TOKENS_RANGE, TEMPERATURE_RANGE
from ...config.resolver import ConfigResolver
from ...persistence.interfaces.repos import IUnitOfWork
from ...persistence.sqlite import get_uow
from ...prompts import SmartAnswerInput
from ..config_service import ConfigService
from ..dispatcher import GenerationDispatcher
from ..probe import ConnectionProbe

_T_MIN, _T_MAX = TEMPERATURE_RANGE
_MT_MIN, _MT_MAX = MAX_TOKENS_RANGE


class _Body(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class GenerateBody(_Body):
    """Raw generation: prompt plus optional overrides."""

    prompt: str = Field(min_length=1)
    system_prompt: Optional[str] = None
    temperature: Optional[float] = Field(default=None, ge=_T_MIN, le=_T_MAX)
    max_tokens: Optional[int] = Field(default=None, ge=_MT_MIN, le=_MT_MAX)

    def to_request(self) -> GenerationRequest:
        return GenerationRequest(
            prompt=self.prompt,
            system_prompt=self.system_prompt,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )


class CoverLetterBody(_Body):
    job_description: str = Field(min_length=10)


class ResumeOptimizeBody(_Body):
    job_description: str = Field(min_length=10)


class AnswerBody(_Body):
    question: str = Field(min_length=1)
    context: Optional[str] = None


class SmartAnswerBody(_Body):
    """Form question with the job context scraped by the extension."""

    question: str = Field(min_length=1)
    company_name: Optional[str] = None
    company_info: Optional[str] = None
    job_description: Optional[str] = None
    job_url: Optional[str] = None
    job_title: Optional[str] = None
    max_length: Optional[int] = Field(default=None, ge=1)

    def to_input(self) -> SmartAnswerInput:
        return SmartAnswerInput(**self.model_dump(by_alias=False))


class UpdateConfigBody(_Body):
    """Partial config update; omitted fields are left untouched."""

    active_provider: Optional[ProviderId] = None
    openai_api_key: Optional[str] = None
    openai_model: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    anthropic_model: Optional[str] = None
    openrouter_api_key: Optional[str] = None
    openrouter_model: Optional[str] = None
    local_llm_url: Optional[str] = None
    local_llm_model: Optional[str] = None
    temperature: Optional[float] = Field(default=None, ge=_T_MIN, le=_T_MAX)
    max_tokens: Optional[int] = Field(default=None, ge=_MT_MIN, le=_MT_MAX)

    def changes(self) -> Dict[str, Any]:
        data = self.model_dump(exclude_unset=True, by_alias=False)
        if isinstance(data.get("active_provider"), ProviderId):
            data["active_provider"] = data["active_provider"].value
        return data


class ConnectionTestBody(_Body):
    provider: Optional[ProviderId] = None


class MissingIdentityError(DispatchError):
    """Request reached an authenticated route without a user identity."""

    code = ErrorCode.UNAUTHORIZED
    status_code = 401

    def __init__(self) -> None:
        super().__init__("Unauthorized")


def get_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """Identity supplied by the upstream auth collaborator via ``X-User-Id``."""
    if not x_user_id or not x_user_id.strip():
        raise MissingIdentityError()
    return x_user_id.strip()


def get_uow_dep(request: Request) -> Iterator[IUnitOfWork]:
    """FastAPI dependency yielding a request-scoped Unit of Work."""
    uow = get_uow(request.app.state.db_path)
    try:
        yield uow
    finally:
        uow.close()


def get_resolver(request: Request, uow: IUnitOfWork = Depends(get_uow_dep)) -> ConfigResolver:
    return ConfigResolver(uow.configs, settings_loader=request.app.state.settings_loader)


def get_dispatcher(
    request: Request,
    uow: IUnitOfWork = Depends(get_uow_dep),
    resolver: ConfigResolver = Depends(get_resolver),
) -> GenerationDispatcher:
    return GenerationDispatcher(request.app.state.registry, resolver, uow.profiles)


def get_probe(request: Request, resolver: ConfigResolver = Depends(get_resolver)) -> ConnectionProbe:
    return ConnectionProbe(request.app.state.registry, resolver)


def get_config_service(request: Request, uow: IUnitOfWork = Depends(get_uow_dep)) -> ConfigService:
    return ConfigService(uow.configs, settings_loader=request.app.state.settings_loader)


__all__ = [
    "GenerateBody",
    "CoverLetterBody",
    "ResumeOptimizeBody",
    "AnswerBody",
    "SmartAnswerBody",
    "UpdateConfigBody",
    "ConnectionTestBody",
    "MissingIdentityError",
    "get_user_id",
    "get_uow_dep",
    "get_resolver",
    "get_dispatcher",
    "get_probe",
    "get_config_service",
]
