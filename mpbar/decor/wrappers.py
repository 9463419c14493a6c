"""Decorators that wrap other decorators to change their output on events."""

from __future__ import annotations

from typing import Callable, Optional

from mpbar.decor.decorator import WC, Decorator, Statistics, WidthChannel


class _Wrapper(Decorator):
    """Base for decorators that delegate width handling to a wrapped one."""

    def __init__(self, decorator: Decorator) -> None:
        self.decorator = decorator

    @property
    def wc(self) -> WC:
        return self.decorator.wc

    def format(self, text: str) -> tuple[str, int]:
        return self.decorator.format(text)

    def sync(self) -> tuple[Optional[WidthChannel], bool]:
        return self.decorator.sync()

    def unwrap(self) -> Decorator:
        """Return the wrapped decorator."""
        return self.decorator


class MetaWrapper(_Wrapper):
    """Applies ``fn`` to the wrapped decorator's text, keeping its width."""

    def __init__(self, decorator: Decorator, fn: Callable[[str], str]) -> None:
        super().__init__(decorator)
        self.fn = fn

    def decor(self, stats: Statistics) -> tuple[str, int]:
        text, width = self.decorator.decor(stats)
        return self.fn(text), width

    def unwrap(self) -> Decorator:
        return self.decorator


class OnAbortWrapper(_Wrapper):
    """Shows ``message`` instead of the wrapped output once the bar is aborted."""

    def __init__(self, decorator: Decorator, message: str) -> None:
        super().__init__(decorator)
        self.message = message

    def decor(self, stats: Statistics) -> tuple[str, int]:
        if stats.aborted:
            return self.format(self.message)
        return self.decorator.decor(stats)

    def unwrap(self) -> Decorator:
        return self.decorator


class OnAbortMetaWrapper(_Wrapper):
    """Applies ``fn`` to the wrapped output once the bar is aborted."""

    def __init__(self, decorator: Decorator, fn: Callable[[str], str]) -> None:
        super().__init__(decorator)
        self.fn = fn

    def decor(self, stats: Statistics) -> tuple[str, int]:
        if stats.aborted:
            text, width = self.decorator.decor(stats)
            return self.fn(text), width
        return self.decorator.decor(stats)

    def unwrap(self) -> Decorator:
        return self.decorator


class OnCompleteWrapper(_Wrapper):
    """Shows ``message`` instead of the wrapped output once the bar completes."""

    def __init__(self, decorator: Decorator, message: str) -> None:
        super().__init__(decorator)
        self.message = message

    def decor(self, stats: Statistics) -> tuple[str, int]:
        if stats.completed:
            return self.format(self.message)
        return self.decorator.decor(stats)

    def unwrap(self) -> Decorator:
        return self.decorator


class OnCompleteMetaWrapper(_Wrapper):
    """Applies ``fn`` to the wrapped output once the bar completes."""

    def __init__(self, decorator: Decorator, fn: Callable[[str], str]) -> None:
        super().__init__(decorator)
        self.fn = fn

    def decor(self, stats: Statistics) -> tuple[str, int]:
        if stats.completed:
            text, width = self.decorator.decor(stats)
            return self.fn(text), width
        return self.decorator.decor(stats)

    def unwrap(self) -> Decorator:
        return self.decorator


def meta(decorator: Optional[Decorator], fn: Callable[[str], str]) -> Optional[Decorator]:
    """Wrap output with meta information such as ANSI escape codes."""
    if decorator is None:
        return None
    return MetaWrapper(decorator, fn)


def on_abort(decorator: Optional[Decorator], message: str) -> Optional[Decorator]:
    """Display ``message`` on abort."""
    if decorator is None:
        return None
    return OnAbortWrapper(decorator, message)


def on_abort_meta(
    decorator: Optional[Decorator], fn: Callable[[str], str]
) -> Optional[Decorator]:
    """Apply ``fn`` to the output on abort."""
    if decorator is None:
        return None
    return OnAbortMetaWrapper(decorator, fn)


def on_complete(decorator: Optional[Decorator], message: str) -> Optional[Decorator]:
    """Display ``message`` on completion."""
    if decorator is None:
        return None
    return OnCompleteWrapper(decorator, message)


def on_complete_meta(
    decorator: Optional[Decorator], fn: Callable[[str], str]
) -> Optional[Decorator]:
    """Apply ``fn`` to the output on completion."""
    if decorator is None:
        return None
    return OnCompleteMetaWrapper(decorator, fn)


def on_complete_or_on_abort(
    decorator: Optional[Decorator], message: str
) -> Optional[Decorator]:
    """Display ``message`` on completion or abort."""
    return on_complete(on_abort(decorator, message), message)


def on_complete_meta_or_on_abort_meta(
    decorator: Optional[Decorator], fn: Callable[[str], str]
) -> Optional[Decorator]:
    """Apply ``fn`` to the output on completion or abort."""
    return on_complete_meta(on_abort_meta(decorator, fn), fn)


def conditional(
    cond: bool, a: Optional[Decorator], b: Optional[Decorator] = None
) -> Optional[Decorator]:
    """Return ``a`` if ``cond`` is true, otherwise ``b``."""
    return a if cond else b


def predicative(
    predicate: Callable[[], bool], a: Optional[Decorator], b: Optional[Decorator] = None
) -> Optional[Decorator]:
    """Return ``a`` if ``predicate()`` is true, otherwise ``b``."""
    return a if predicate() else b


def on_condition(decorator: Optional[Decorator], cond: bool) -> Optional[Decorator]:
    """Return ``decorator`` only if ``cond`` is true."""
    return conditional(cond, decorator, None)


def on_predicate(
    decorator: Optional[Decorator], predicate: Callable[[], bool]
) -> Optional[Decorator]:
    """Return ``decorator`` only if ``predicate()`` is true."""
    return predicative(predicate, decorator, None)