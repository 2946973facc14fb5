"""Classified failures of a generation cycle.

Every error carries a user-facing message plus the ``kind`` and HTTP status
the API layer renders it with.
"""


class GenerationError(Exception):
    kind: str = "generation_error"
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingCredential(GenerationError):
    kind = "missing_credential"
    status_code = 503


class InvalidImage(GenerationError):
    kind = "invalid_image"
    status_code = 400


class BlockedRequest(GenerationError):
    kind = "blocked_request"
    status_code = 422


class SafetyBlocked(GenerationError):
    kind = "safety_blocked"
    status_code = 422


class AbnormalStop(GenerationError):
    kind = "abnormal_stop"
    status_code = 502


class IncompletePayload(GenerationError):
    kind = "incomplete_payload"
    status_code = 502


class UnknownFailure(GenerationError):
    kind = "unknown_failure"
    status_code = 502
