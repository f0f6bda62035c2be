from __future__ import annotations

class NullArgumentError(TypeError):
    """A required argument (function, predicate or Option container) was None."""

    argument: str

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"{argument} must not be None")

__all__ = ("NullArgumentError",)
