# AGPL-3.0 License

"""
Exception hierarchy for PR Gate.
"""


class PRGateError(Exception):
    """Base class for all PR Gate errors."""


class ConfigurationError(PRGateError):
    """
    Invalid or missing configuration.

    Always fatal: raised before any check runs, or by a check whose
    configuration cannot be used (e.g. a pattern that does not compile).
    """


class ExternalFetchError(PRGateError):
    """
    Pull request data could not be fetched.

    Checks convert this into a skip or error step depending on
    the ``ignore_github_error`` policy.
    """


class FetchNetworkError(ExternalFetchError):
    """Transport failure or non-2xx response."""


class FetchAuthError(ExternalFetchError):
    """The token was rejected or lacks access to the repository."""


class FetchDecodeError(ExternalFetchError):
    """The response payload could not be decoded."""
