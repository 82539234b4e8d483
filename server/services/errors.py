"""Exceptions raised by the analysis services."""


class GuardianError(Exception):
    """Base class for errors the UI and API know how to report."""

    kind = "unknown"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRepositoryUrl(GuardianError):
    kind = "validation"


class ConfigurationError(GuardianError):
    kind = "configuration"


class AnalysisParseError(GuardianError):
    """The provider answered, but not with a usable analysis result."""

    kind = "parse"

    def __init__(self, message: str, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text
