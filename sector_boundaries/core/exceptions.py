"""Unified exception taxonomy.

Every domain exception inherits from ``BoundaryError`` and carries
structured context fields so that callers and logs see a stable error
payload.

Malformed boundary *data* never reaches this hierarchy: bad JSON, unknown
shapes and non-numeric points all degrade to "no boundary".  The classes
here cover programming errors, configuration errors and failures reported
by the map-rendering collaborator.

Taxonomy categories
-------------------
- ``ValidationError``  : input/contract violations, never retryable.
- ``PermanentError``   : unrecoverable domain failures, not retryable.
- ``ContractError``    : payload drift between the module and a collaborator.
"""

from __future__ import annotations


class BoundaryError(Exception):
    """Base exception for all boundary-geometry errors.

    Attributes:
        message: Human-readable error description.
        stage: Stage where the error occurred (e.g. ``"geometry"``).
        code: Machine-readable error code (e.g. ``"EMPTY_RING"``).
        retryable: Whether repeating the operation could succeed.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, PermanentError):
            return "permanent"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(BoundaryError):
    """Input or domain-model validation failure. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class PermanentError(BoundaryError):
    """Unrecoverable domain failure. Not retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class ContractError(BoundaryError):
    """Payload or interface drift with a collaborator. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Concrete errors
# ---------------------------------------------------------------------------


class EmptyRingError(PermanentError):
    """Raised when a ring with no points reaches code that needs at least one.

    Callers must check ring presence first; hitting this is a bug, not a
    data problem.
    """

    default_stage = "geometry"
    default_code = "EMPTY_RING"


class ViewportFitError(ContractError):
    """Raised by a map collaborator when it cannot frame a region."""

    default_stage = "viewport"
    default_code = "VIEWPORT_FIT_FAILED"
