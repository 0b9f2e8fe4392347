"""Exception taxonomy shared by the parser, the requester and the agent."""


class InsightError(Exception):
    """Base class for every failure the app knows how to report."""


class ParseError(InsightError):
    """An uploaded file could not be read as CSV at all."""


class ValidationError(InsightError):
    """The analysis request is not valid (e.g. no agents selected)."""


class RequestError(InsightError):
    """The text-completion service call failed or returned an unusable body."""
