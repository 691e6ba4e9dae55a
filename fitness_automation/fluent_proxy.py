"""
Deferred, chainable execution for objects whose methods are async actions.

A handle records method calls instead of running them, so a sequence of page
actions can be described without awaiting each step:

    page = create_fluent_proxy(MyRoutinesPage(driver))
    await page.wait_for_screen().tap_create_routine().execute()

Nothing touches the target until `execute()` is awaited. The queue then drains
strictly in order; each step starts only after the previous one has settled.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

EXECUTE = "execute"


@dataclass(frozen=True)
class Invocation:
    name: str
    args: tuple[Any, ...]
    kwargs: dict[str, Any]

    def describe(self) -> str:
        parts = [repr(a) for a in self.args]
        parts.extend(f"{k}={v!r}" for k, v in self.kwargs.items())
        return f"{self.name}({', '.join(parts)})"


class FluentProxy(Generic[T]):
    """
    Chainable handle around `target`.

    - Calling a method of the target queues it and returns this handle.
    - Reading a non-callable member returns the target's live value.
    - `execute()` is the only member that is not forwarded to the target, along
      with the handle's own `_fluent_target` and `_fluent_queue` slots.
    - Method names are checked against the wrapped target when queued, so a
      step that returns another object can only be followed by methods the
      target also has.
    """

    __slots__ = ("_fluent_target", "_fluent_queue")

    def __init__(self, target: T) -> None:
        self._fluent_target = target
        self._fluent_queue: list[Invocation] = []

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not defined on the handle itself.
        if name in FluentProxy.__slots__:
            raise AttributeError(name)
        value = getattr(self._fluent_target, name)
        if not callable(value):
            return value

        def _enqueue(*args: Any, **kwargs: Any) -> FluentProxy[T]:
            self._fluent_queue.append(Invocation(name=name, args=args, kwargs=kwargs))
            return self

        _enqueue.__name__ = name
        return _enqueue

    async def execute(self) -> Any:
        """
        Run every queued call against the target and return the final result.

        The value returned by each step becomes the object the next step is
        looked up on (a step returning None keeps the current one). On failure
        the remaining steps are dropped and the original exception propagates,
        annotated with the failing step.
        """
        steps = list(self._fluent_queue)
        self._fluent_queue.clear()

        current: Any = self._fluent_target
        for index, step in enumerate(steps, 1):
            try:
                outcome = getattr(current, step.name)(*step.args, **step.kwargs)
                if inspect.isawaitable(outcome):
                    outcome = await outcome
            except Exception as e:
                note = f"fluent step {index}/{len(steps)} failed: {step.describe()}"
                # Targets may re-raise the same exception instance on every drain.
                if note not in getattr(e, "__notes__", ()):
                    e.add_note(note)
                raise
            if outcome is not None:
                current = outcome
        return current

    def __repr__(self) -> str:
        return f"FluentProxy({self._fluent_target!r}, pending={len(self._fluent_queue)})"


def create_fluent_proxy(target: T) -> FluentProxy[T]:
    return FluentProxy(target)


def pending_steps(handle: FluentProxy[Any]) -> tuple[str, ...]:
    """Snapshot of queued operation names, oldest first."""
    return tuple(step.name for step in handle._fluent_queue)
