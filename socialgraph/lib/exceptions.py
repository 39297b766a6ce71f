"""
Error types shared by the SocialGraph apps.

Every error raised on purpose by the entity, relationship, group and
livesearch code inherits from SocialGraphError, so that view code can map it
onto an HTTP status in one place.
"""


class SocialGraphError(Exception):
    status = 500

    def __init__(self, message='', **details):
        super(SocialGraphError, self).__init__(message)
        self.message = message
        self.details = details


class NotFound(SocialGraphError):
    """The entity is missing, disabled, or not readable by the viewer."""
    status = 404


class InvalidState(SocialGraphError):
    """The entity has not been loaded yet, or has already been deleted."""
    status = 409


class BadRequest(SocialGraphError):
    """A query parameter is malformed or unrecognized."""
    status = 400


class Unauthorized(SocialGraphError):
    """An authenticated viewer is required."""
    status = 401
