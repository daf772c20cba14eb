# AGPL-3.0 License

"""
Error kinds raised by the grading toolkit.
"""


class GradingToolkitError(Exception):
    """Base class for every error the toolkit raises itself."""


class InvalidFormatError(GradingToolkitError, ValueError):
    """A submission folder name does not have the expected segment structure."""


class LinterFailure(GradingToolkitError, RuntimeError):
    """The external style checker could not produce a report."""


class RulesetNotFoundError(GradingToolkitError, FileNotFoundError):
    """No style ruleset file was found in the search path."""


class SubmissionArchiveError(GradingToolkitError, LookupError):
    """A submission archive, or the source file wanted from it, is missing or ambiguous."""


class InvalidRequirementMapError(GradingToolkitError, ValueError):
    """Stored requirements are not a mapping of keys to lists of records."""
