# upstream/errors.py


class UpstreamError(Exception):
    """Base for every failure while talking to AFAD. Maps to an HTTP status."""

    status_code = 500
    kind = "upstream"


class UpstreamURLError(UpstreamError):
    status_code = 500
    kind = "url"


class UpstreamNetworkError(UpstreamError):
    status_code = 502
    kind = "network"


class UpstreamStatusError(UpstreamError):
    status_code = 502
    kind = "status"

    def __init__(self, message: str, upstream_status: int):
        super().__init__(message)
        self.upstream_status = upstream_status


class UpstreamReadError(UpstreamError):
    status_code = 500
    kind = "read"


class RecordDecodeError(UpstreamError):
    status_code = 500
    kind = "decode"
