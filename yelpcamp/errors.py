"""
Application error types.

Services raise these; views translate NotFoundError and PermissionDeniedError
into a flash message plus a redirect, everything else reaches the app-level
error handlers registered in ``create_app``.
"""


class YelpCampError(Exception):
    """Base exception carrying a user-facing message and an HTTP status code."""
    def __init__(self, message, status_code=500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(YelpCampError):
    def __init__(self, message="Cannot find that campground!"):
        super().__init__(message, 404)


class PermissionDeniedError(YelpCampError):
    def __init__(self, message="You do not have permission to do that!"):
        super().__init__(message, 403)


class ValidationError(YelpCampError):
    def __init__(self, message):
        super().__init__(message, 400)
