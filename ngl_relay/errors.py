"""Error taxonomy for the relay pipeline"""


class RelayError(Exception):
    """Base class for relay failures"""
    status_code = 500


class RelayValidationError(RelayError):
    """Missing parameters or an unusable target"""
    status_code = 400

    def __init__(self, message_key: str):
        super().__init__(message_key)
        self.message_key = message_key


class UpstreamError(RelayError):
    """NGL answered with a non-success status"""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Upstream responded with HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class TransportError(RelayError):
    """The submission could not be sent or its reply could not be read"""
    status_code = 500
