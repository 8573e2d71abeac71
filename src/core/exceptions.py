class TriageError(Exception):
    """
    Base class for all errors raised by the issue triage engine.
    """


class EmptyInput(TriageError):
    """
    Raised when both title and description are blank after trimming.
    This is a caller error and is never recovered internally.
    """


class ClassifierUnavailable(TriageError):
    """
    Failure of the external zero-shot oracle: network errors, authentication
    failures, malformed payloads or timeouts.

    Carried inside a failed ZeroShotOutcome; it never crosses the
    IssueClassifier.classify boundary.
    """

    def __init__(self, message: str, provider: str = "unknown") -> None:
        super().__init__(message)
        self.provider = provider


class UnknownCategory(TriageError):
    """
    Raised when a category absent from the registry is referenced.
    Indicates a configuration bug, not a runtime condition.
    """

    def __init__(self, category: str) -> None:
        super().__init__(f"Unknown category: '{category}'")
        self.category = category
