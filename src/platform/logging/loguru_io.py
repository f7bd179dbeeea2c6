"""
`Logger.base` for event logs and `@Logger.io` for call tracing.

`@Logger.io` logs arguments and return values at DEBUG (only when
settings.DEBUG is on), logs a failure once at the layer where it was raised,
and masks guest contact fields and credentials on the way.
"""

from collections.abc import Awaitable
from functools import wraps
from inspect import iscoroutinefunction
import types
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar, cast, overload

import attrs


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io_config import (
    ExtraField,
    call_depth_var,
    custom_logger,
)
from src.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    check_call_signature,
    get_chain_start_time,
    mask_sensitive,
    reset_call_depth,
    should_mask_keyword,
    truncate_content,
)

_F = TypeVar('_F', bound=Callable[..., Any])

# _emit -> on_* hook -> wrapper -> caller of the decorated function
_CALLER_DEPTH = 3


class LoguruIO:
    def __init__(
        self, custom_logger: 'LoguruLogger', *, reraise: bool = True, truncate_content: bool = False
    ) -> None:
        self._custom_logger = custom_logger
        self.reraise = reraise
        self.truncate_content = truncate_content
        self.extra: dict[str, Any] = {}

    def _emit(self, level: str, message: str, *, exception: BaseException | None = None) -> None:
        self._custom_logger.bind(**self.extra).opt(depth=_CALLER_DEPTH, exception=exception).log(
            level, message
        )

    def on_enter(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        call_depth_var.set(call_depth_var.get() + 1)
        self.extra[ExtraField.CHAIN_START_TIME] = get_chain_start_time()
        if settings.DEBUG:
            self._emit(
                'DEBUG',
                f'args: {self.mask_sensitive(args)}, kwargs: {self.mask_sensitive(kwargs)}',
            )

    def on_return(self, return_value: Any) -> Any:
        if settings.DEBUG:
            self._emit('DEBUG', f'return: {self.mask_sensitive(return_value)}')
        return return_value

    def on_error(self, e: Exception) -> None:
        # An error bubbling through several decorated layers is logged once, at the innermost
        if getattr(e, '_has_logged', False):
            return
        e._has_logged = True  # type: ignore[attr-defined]

        if not isinstance(e, CustomBaseError):
            self._emit('ERROR', f'{type(e).__name__}: {e}', exception=e)
            return
        reason = f'[{e.reason_code}]' if e.reason_code else ''
        self._emit(
            'ERROR' if e.status_code >= 500 else 'WARNING',
            f'{type(e).__name__}{reason} {e.status_code}: {e.message}',
        )

    def mask_sensitive(self, data: Any) -> Any:
        if isinstance(data, dict):
            masked: Any = {
                key: self.mask_sensitive(should_mask_keyword(key, value))
                for key, value in data.items()
            }
        elif attrs.has(type(data)):
            # Commands and DTOs carry guest contact fields; mask them by field name
            masked = {
                type(data).__name__: {
                    field.name: self.mask_sensitive(
                        should_mask_keyword(field.name, getattr(data, field.name))
                    )
                    for field in attrs.fields(type(data))
                }
            }
        elif isinstance(data, list | tuple):
            masked = type(data)(self.mask_sensitive(item) for item in data)
        else:
            masked = mask_sensitive(data)

        return truncate_content(masked) if self.truncate_content else masked

    def _hide_from_traceback(self, func: Callable[..., Any]) -> Callable[..., Any]:
        func.__code__ = func.__code__.replace(  # type: ignore[attr-defined]
            co_filename=cast(types.FunctionType, self._custom_logger.catch).__code__.co_filename
        )
        return func

    def __call__(self, func: _F) -> _F:
        self.extra[ExtraField.CALL_TARGET] = build_call_target_func_path(func)

        if iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    self.on_enter(args, kwargs)
                    check_call_signature(func, args, kwargs)
                    return self.on_return(await cast(Awaitable[Any], func(*args, **kwargs)))
                except Exception as e:
                    self.on_error(e)
                    if self.reraise:
                        raise
                    return None
                finally:
                    reset_call_depth()

            return cast(_F, self._hide_from_traceback(async_wrapper))

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                self.on_enter(args, kwargs)
                check_call_signature(func, args, kwargs)
                return self.on_return(func(*args, **kwargs))
            except Exception as e:
                self.on_error(e)
                if self.reraise:
                    raise
                return None
            finally:
                reset_call_depth()

        return cast(_F, self._hide_from_traceback(sync_wrapper))


_P = ParamSpec('_P')
_T = TypeVar('_T')


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate_content: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        """Bare `@Logger.io` or configured `@Logger.io(reraise=False)`"""
        io = LoguruIO(custom_logger, reraise=reraise, truncate_content=truncate_content)
        return io(func) if func else io
