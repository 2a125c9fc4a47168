"""
Error Taxonomy

Standard error taxonomy for the Merkle tree library.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the library."""

    # Tree state errors
    EMPTY_TREE = "EMPTY_TREE"

    # Input errors
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_DIGEST = "INVALID_DIGEST"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class MerkleTreeError(BaseModel):
    """
    Base error model for structured error communication.

    Lets callers pass errors around and serialize them without
    re-raising exceptions.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.EMPTY_TREE],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "MerkleTreeException":
        """Convert this error model to a raised exception."""
        return MerkleTreeException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


class InvalidInputError(MerkleTreeError):
    """Error model for rejected records or query candidates."""

    code: str = Field(default=ErrorCodes.INVALID_INPUT)
    index: int | None = Field(
        default=None,
        description="Position of the offending record in the input sequence",
    )
    actual_type: str | None = Field(
        default=None,
        description="Type name of the value that was received",
    )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MerkleTreeException(Exception):
    """
    Base exception for all Merkle tree errors.

    This exception carries structured error information and can be
    converted to/from MerkleTreeError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "MERKLETREE_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> MerkleTreeError:
        """Convert this exception to a MerkleTreeError model."""
        return MerkleTreeError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class EmptyTreeException(MerkleTreeException):
    """Exception raised when a query needs a root but the tree has none."""

    def __init__(
        self,
        message: str = "Merkle tree is empty",
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if operation:
            full_details["operation"] = operation
        super().__init__(
            message=message,
            code=ErrorCodes.EMPTY_TREE,
            details=full_details,
            retryable=False,
        )


class InvalidInputException(MerkleTreeException):
    """Exception raised when records or candidates have an unsupported type."""

    def __init__(
        self,
        message: str,
        index: int | None = None,
        actual_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if index is not None:
            full_details["index"] = index
        if actual_type:
            full_details["actual_type"] = actual_type
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_INPUT,
            details=full_details,
            retryable=False,
        )

    def to_error_model(self) -> InvalidInputError:
        return InvalidInputError(
            message=self.message,
            details=self.details,
            index=self.details.get("index"),
            actual_type=self.details.get("actual_type"),
        )


class InvalidDigestException(MerkleTreeException):
    """Exception raised for hex text or node digests that are not valid digests."""

    def __init__(
        self,
        message: str,
        value: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if value is not None:
            full_details["value"] = value[:80]
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_DIGEST,
            details=full_details,
            retryable=False,
        )


class ConfigException(MerkleTreeException):
    """Exception raised when runtime configuration cannot be loaded."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if key:
            full_details["key"] = key
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIG_ERROR,
            details=full_details,
            retryable=False,
        )
