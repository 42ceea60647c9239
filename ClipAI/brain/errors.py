from ClipAI.runtime.errors import humanize


class AIError(Exception):
    """Terminal failure of one AI request; ``str()`` is the message shown to the user."""

    error_code = "execution_failed"

    def __init__(self, details=""):
        self.details = str(details or "")
        super().__init__(humanize(self.error_code, self.details))


class MissingCredential(AIError):
    error_code = "missing_api_key"


class InvalidEndpoint(AIError):
    error_code = "invalid_endpoint"


class EmptyResponse(AIError):
    error_code = "empty_response"


class TransportError(AIError):
    error_code = "connect_failed"


class HTTPError(AIError):
    error_code = "http_error"

    def __init__(self, status, body=""):
        self.status = int(status)
        self.body = str(body or "")
        super().__init__(f"{self.status}: {self.body}")
