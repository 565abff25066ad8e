# identity_api/domain/errors.py


class IdentityError(Exception):
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(IdentityError):
    status_code = 400


class NotFoundError(IdentityError):
    status_code = 404
