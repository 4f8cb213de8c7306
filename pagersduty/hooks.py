"""Call hooks for the API clients.

A hook is a plain callable receiving the call context object of the client
(e.g. EventsApiCallContext). Clients declare built-in hooks with the
@with_hooks class decorator; callers add their own via the `hooks` keyword
argument of the client constructor. Methods opt in with @invoke_with_hooks.

Example:
    >>> @with_hooks(hooks=Hooks(pre_hooks=[_metrics_hook]))
    ... class Api:
    ...     def __init__(self, *, hooks: Hooks | None = None) -> None: ...
    ...
    ...     @invoke_with_hooks(lambda self: CallContext(method="users.get"))
    ...     def user(self, user_id: str) -> User: ...
"""

import contextlib
import functools
from collections.abc import Callable, Generator, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias, TypeVar

C = TypeVar("C", bound=type)
S = TypeVar("S")
T = TypeVar("T")

Hook: TypeAlias = Callable[[Any], None]


@dataclass(frozen=True)
class Hooks:
    """Hooks run around an API call.

    Attributes:
        pre_hooks: Called before the call
        post_hooks: Called after the call, whether it succeeded or not
        error_hooks: Called when the call raised, before the exception propagates
    """

    pre_hooks: Sequence[Hook] = ()
    post_hooks: Sequence[Hook] = ()
    error_hooks: Sequence[Hook] = ()

    def merge(self, other: "Hooks | None") -> "Hooks":
        """Return new Hooks running self's hooks first, then other's."""
        if other is None:
            return self
        return Hooks(
            pre_hooks=(*self.pre_hooks, *other.pre_hooks),
            post_hooks=(*self.post_hooks, *other.post_hooks),
            error_hooks=(*self.error_hooks, *other.error_hooks),
        )


@contextlib.contextmanager
def run_hooks(context: T, hooks: Hooks) -> Generator[None, Any, None]:
    for hook in hooks.pre_hooks:
        hook(context)
    try:
        yield
    except Exception:
        for hook in hooks.error_hooks:
            hook(context)
        raise
    finally:
        for hook in hooks.post_hooks:
            hook(context)


def with_hooks(hooks: Hooks) -> Callable[[C], C]:
    """Class decorator installing built-in hooks on an API client.

    The decorated class' __init__ gets `self._hooks` set to the built-in hooks
    merged with the `hooks` keyword argument (if any).
    """

    def decorator(cls: C) -> C:
        original_init = cls.__init__

        @functools.wraps(original_init)
        def __init__(self: Any, *args: Any, **kwargs: Any) -> None:
            self._hooks = hooks.merge(kwargs.get("hooks"))
            original_init(self, *args, **kwargs)

        cls.__init__ = __init__  # type: ignore[misc]
        return cls

    return decorator


def invoke_with_hooks(
    context_factory: Callable[[S], T],
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Method decorator running the instance hooks around the call.

    Args:
        context_factory: Builds the call context from the instance
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            with run_hooks(context_factory(self), self._hooks):
                return func(self, *args, **kwargs)

        return wrapper

    return decorator
