from inspect import signature
import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


MASK = '********'
MAX_CONTENT_LENGTH = 500


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    module = getattr(func, '__module__', '') or ''
    qualname = getattr(func, '__qualname__', getattr(func, '__name__', repr(func)))
    return f'{module.rsplit(".", 1)[-1]}.{qualname}' if module else qualname


def get_chain_start_time() -> str:
    """Time elapsed since the outermost decorated call started, as a short string"""
    now = time.perf_counter()
    if call_depth_var.get() <= 1 or not chain_start_time_var.get():
        chain_start_time_var.set(now)
        return 'chain +0.000s'
    return f'chain +{now - chain_start_time_var.get():.3f}s'


def reset_call_depth() -> None:
    depth = call_depth_var.get()
    call_depth_var.set(max(depth - 1, 0))
    if depth <= 1:
        chain_start_time_var.set(0)


def should_mask_keyword(key: Any, value: Any) -> Any:
    if isinstance(key, str) and any(word in key.lower() for word in SENSITIVE_KEYWORDS):
        return MASK
    return value


def mask_sensitive(data: Any) -> Any:
    if hasattr(data, 'get_secret_value'):  # pydantic SecretStr
        return MASK
    return data


def truncate_content(data: Any) -> Any:
    text = data if isinstance(data, str) else repr(data)
    if len(text) <= MAX_CONTENT_LENGTH:
        return data
    return f'{text[:MAX_CONTENT_LENGTH]}...(+{len(text) - MAX_CONTENT_LENGTH} chars)'


def check_call_signature(
    func: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]
) -> None:
    """Fail fast on a bad call signature before the wrapped function starts running"""
    try:
        sig = signature(func)
    except ValueError:  # builtins without an introspectable signature
        return
    sig.bind(*args, **kwargs)
