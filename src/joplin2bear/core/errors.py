"""Exception hierarchy for document building and migration"""

from enum import Enum
from pathlib import Path


class BuildErrorKind(str, Enum):
    missing_start_marker       = "missing_start_marker"
    missing_end_marker         = "missing_end_marker"
    missing_front_matter_slice = "missing_front_matter_slice"
    missing_title              = "missing_title"
    missing_created            = "missing_created"
    invalid_created_format     = "invalid_created_format"
    missing_updated            = "missing_updated"
    invalid_updated_format     = "invalid_updated_format"


class BuildError(Exception):
    """Base for every failure raised while building a single Document."""
    kind: BuildErrorKind
    message = "Could not build document"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class MissingStartMarkerError(BuildError):
    kind = BuildErrorKind.missing_start_marker
    message = "Could not find front matter start marker"


class MissingEndMarkerError(BuildError):
    kind = BuildErrorKind.missing_end_marker
    message = "Could not find end of front matter"


class MissingFrontMatterSliceError(BuildError):
    kind = BuildErrorKind.missing_front_matter_slice
    message = "Could not find front matter"


class MissingFieldError(BuildError):
    """A required front matter key is absent or has a blank value."""
    field: str

    def __init__(self):
        super().__init__(f"Could not find {self.field}")


class MissingTitleError(MissingFieldError):
    kind = BuildErrorKind.missing_title
    field = "title"


class MissingCreatedError(MissingFieldError):
    kind = BuildErrorKind.missing_created
    field = "created"


class MissingUpdatedError(MissingFieldError):
    kind = BuildErrorKind.missing_updated
    field = "updated"


class InvalidDateFormatError(BuildError):
    """A date field is present but is not an RFC 3339 timestamp with offset."""
    field: str

    def __init__(self, value: str):
        super().__init__(f"Invalid {self.field} date format: {value!r}")
        self.value = value


class InvalidCreatedFormatError(InvalidDateFormatError):
    kind = BuildErrorKind.invalid_created_format
    field = "created"


class InvalidUpdatedFormatError(InvalidDateFormatError):
    kind = BuildErrorKind.invalid_updated_format
    field = "updated"


class MigrationError(Exception):
    """Base for failures in the file-level collaborators around the core."""


class SourceDirectoryError(MigrationError):
    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class DocumentBuildFailedError(MigrationError):
    """Wraps the BuildError of one document together with its path."""

    def __init__(self, path: Path, error: BuildError):
        super().__init__(f"Error building {path}: {error}")
        self.path = path
        self.error = error


class ResourcesNotFoundError(MigrationError):
    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class WriteError(MigrationError):
    def __init__(self, path: Path, cause: OSError):
        super().__init__(f"Error writing {path}: {cause}")
        self.path = path


class ReadError(MigrationError):
    def __init__(self, path: Path, cause: Exception):
        super().__init__(f"Error reading {path}: {cause}")
        self.path = path
