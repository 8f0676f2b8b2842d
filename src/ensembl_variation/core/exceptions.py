class PipelineError(Exception):
    """Base exception for pipeline failures."""


class ValidationError(PipelineError):
    """Raised when validation fails."""


class RowDecodeError(ValidationError):
    """Raised when a store row does not have the expected individual shape."""


class IndividualConflictError(ValidationError):
    """Raised in strict mode when rows for one individual disagree."""


class InputFormatError(ValidationError):
    """Raised when an import input file cannot be parsed."""


class MissingParameterError(ValidationError):
    """Raised when a job is missing a required parameter."""


class MissingInputError(PipelineError):
    """Raised when an expected input file is not present."""


class ImportExecutionError(PipelineError):
    """Raised when an import job fails."""
