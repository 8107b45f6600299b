from __future__ import annotations

class MissingDefaultError(ValueError):
    """A required default was None. Programming misuse, never captured."""

    argument: str

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"{argument!r} must not be None")

class InvalidOutcomeError(TypeError):
    """Deferred computation returned something that is neither Option nor Outcome."""

    returned: object

    def __init__(self, returned: object) -> None:
        self.returned = returned
        super().__init__(
            f"Deferred computation must return Option or Outcome, got {type(returned).__name__}"
        )

__all__ = ("InvalidOutcomeError", "MissingDefaultError")
