"""
Method-interception wrapper for providers and wallet APIs.

with_error_safety(target, context) returns a proxy whose methods behave like
the target's, except that any exception (raised synchronously or by an
awaited coroutine) is normalized, annotated with the method name, passed to
on_error and re-raised as CardanoAppError chained from the original.
"""

from __future__ import annotations

import functools
import inspect
from dataclasses import replace
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Mapping, Union

from cardano_errors.core.exceptions import CardanoAppError
from cardano_errors.core.models import NormalizedError
from cardano_errors.errors_logging import get_logger
from cardano_errors.normalizer import (
    ErrorNormalizer,
    NormalizerConfig,
    create_normalizer,
    get_default_normalizer,
)

logger = get_logger(__name__)

ContextFactory = Callable[[str, tuple], Mapping[str, Any]]
ContextSpec = Union[Mapping[str, Any], ContextFactory]
OnError = Callable[..., None]


class SafeProxy:
    """Attribute proxy that wraps every callable attribute of the target."""

    def __init__(
        self,
        target: Any,
        context: ContextSpec,
        normalizer: ErrorNormalizer,
        on_error: OnError | None = None,
    ) -> None:
        object.__setattr__(self, "_target", target)
        object.__setattr__(self, "_context", context)
        object.__setattr__(self, "_normalizer", normalizer)
        object.__setattr__(self, "_on_error", on_error)

    def __getattr__(self, name: str) -> Any:
        value = getattr(self._target, name)
        if not callable(value):
            return value
        return self._wrap(name, value)

    def __setattr__(self, name: str, value: Any) -> None:
        setattr(self._target, name, value)

    def __repr__(self) -> str:
        return f"SafeProxy({self._target!r})"

    def _resolve_context(self, method: str, args: tuple) -> Mapping[str, Any]:
        if callable(self._context):
            return self._context(method, args)
        return self._context

    def _normalize(self, err: BaseException, method: str, args: tuple, kwargs: dict) -> CardanoAppError:
        normalized = self._normalizer.normalize(err, self._resolve_context(method, args))
        annotated = annotate_wrapped(normalized, method)
        logger.debug(
            "safe_provider_intercepted",
            method=method,
            code=annotated.code.value,
            error_type=type(err).__name__,
        )
        if self._on_error is not None:
            try:
                self._on_error(annotated, method=method, args=args, kwargs=kwargs)
            except Exception as hook_err:
                logger.warning(
                    "safe_provider_on_error_failed",
                    method=method,
                    error=str(hook_err),
                    error_type=type(hook_err).__name__,
                )
        return CardanoAppError(annotated)

    def _wrap(self, name: str, func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapped(*args: Any, **kwargs: Any) -> Any:
                try:
                    return await func(*args, **kwargs)
                except CardanoAppError:
                    raise
                except Exception as e:
                    raise self._normalize(e, name, args, kwargs) from e

            return async_wrapped

        @functools.wraps(func)
        def wrapped(*args: Any, **kwargs: Any) -> Any:
            try:
                result = func(*args, **kwargs)
            except CardanoAppError:
                raise
            except Exception as e:
                raise self._normalize(e, name, args, kwargs) from e
            if inspect.isawaitable(result):
                return self._guard_awaitable(result, name, args, kwargs)
            return result

        return wrapped

    async def _guard_awaitable(self, awaitable: Awaitable[Any], name: str, args: tuple, kwargs: dict) -> Any:
        try:
            return await awaitable
        except CardanoAppError:
            raise
        except Exception as e:
            raise self._normalize(e, name, args, kwargs) from e


def annotate_wrapped(normalized: NormalizedError, method: str) -> NormalizedError:
    """Copy of normalized with the wrapper markers added to meta."""
    meta = dict(normalized.meta)
    meta["safe_provider_wrapped"] = True
    meta["safe_provider_method"] = method
    return replace(normalized, meta=MappingProxyType(meta))


def _resolve_normalizer(
    normalizer: ErrorNormalizer | None,
    config: NormalizerConfig | None,
) -> ErrorNormalizer:
    if normalizer is not None:
        return normalizer
    if config is not None:
        return create_normalizer(config)
    return get_default_normalizer()


def with_error_safety(
    target: Any,
    context: ContextSpec,
    normalizer: ErrorNormalizer | None = None,
    config: NormalizerConfig | None = None,
    on_error: OnError | None = None,
) -> Any:
    """
    Wrap target so failures surface as CardanoAppError.

    context: Mapping of context fields, or callable (method, args) -> mapping.
    normalizer / config: explicit normalizer, else one built from config, else the default.
    on_error: called as on_error(normalized, method=..., args=..., kwargs=...) before raising;
        an exception from the callback is logged and the CardanoAppError is raised regardless.
    """
    return SafeProxy(target, context, _resolve_normalizer(normalizer, config), on_error)
