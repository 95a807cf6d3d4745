"""Domain errors and failure typing."""


class PipelineError(Exception):
    """Base class for pipeline failures."""

    error_code = "PIPELINE_ERROR"


class ConfigError(PipelineError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class StageError(PipelineError):
    """Raised for stage failures that abort the run."""

    error_code = "STAGE_ERROR"


class SourceError(StageError):
    """Raised when a tabular data source cannot be opened or read."""

    error_code = "SOURCE_ERROR"


class OutputError(StageError):
    """Raised when the serialized output cannot be written."""

    error_code = "OUTPUT_ERROR"
