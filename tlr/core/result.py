"""Tagged outcomes for pipeline steps.

Every step that can fail returns either ``Ok(value)`` or ``Err(error)``
instead of raising. Callers branch on the tag, never on diagnostic text:

    match pipeline.run():
        case Ok(artifact):
            print(f"stripped {artifact}")
        case Err(BuildFailure(returncode=rc)):
            print(f"cargo exited {rc}")
        case Err(StripFailure(missing=True)):
            print("nothing to strip")
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A step that completed.

    Attributes:
        value: What the step produced.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A step that failed.

    Attributes:
        error: Typed description of the failure.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
