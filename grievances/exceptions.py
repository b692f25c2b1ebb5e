class SubmissionError(Exception):
    """Base class for errors raised by the submission store."""


class ValidationError(SubmissionError):
    """A submission field is missing or outside its allowed values."""


class DuplicateId(SubmissionError):
    """A submission with the same id already exists."""


class NotFound(SubmissionError):
    """No submission exists with the given id."""
