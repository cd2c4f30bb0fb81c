"""Exceptions raised while turning curl commands into requests."""


class CurlError(ValueError):
    """Base exception for all curl_parser errors."""
    pass


class CurlParseError(CurlError):
    """Raised when a curl command cannot be parsed."""
    pass


class InvalidCommandError(CurlParseError):
    """Raised when the command does not start with curl or has no arguments."""
    pass


class TokenizeError(CurlParseError):
    """Raised when the command string cannot be split into shell words."""
    pass


class InvalidURLError(CurlParseError):
    """Raised when an http(s) token is not a valid URL."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"invalid URL {url!r}: {reason}")
        self.url = url


class DataFileError(CurlParseError):
    """Raised when a file referenced with @path cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"failed to read {path}: {reason}")
        self.path = path


class ConfigurationError(CurlError):
    """Raised when the parser configuration is invalid."""
    pass


class MissingURLError(CurlError):
    """Raised when a request is built from a command that had no URL."""
    pass
