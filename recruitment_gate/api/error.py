from fastapi import status
from recruitment_gate.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Status for every error code a use case can return
ERROR_STATUS = {
    "INVITATION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "PROCESS_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "WORKER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "VIDEO_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "WORKER_PROCESS_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVITE_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "ALREADY_APPLIED": status.HTTP_409_CONFLICT,
    "VIDEO_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "INVITATION_ALREADY_ACCEPTED": status.HTTP_409_CONFLICT,
    "INVITATION_EXPIRED": status.HTTP_410_GONE,
    "INVITATION_CANCELLED": status.HTTP_410_GONE,
    "INVITATION_EMAIL_MISMATCH": status.HTTP_403_FORBIDDEN,
    "NOT_PROFILE_OWNER": status.HTTP_403_FORBIDDEN,
    "INSUFFICIENT_ROLE": status.HTTP_403_FORBIDDEN,
    "STORAGE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def raise_for_error(error: Error):
    """Raise ClientError for a known error code, ServerError otherwise"""
    status_code = ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
