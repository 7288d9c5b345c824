"""
Errors
------

The errors raised by the service layer. Each carries a human readable
message and the HTTP status that best describes it, so that the views
can pass them straight on to the user. Any extra keyword arguments are
sent along with the message.
"""

from http import HTTPStatus


class ServiceError(Exception):

    status = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status: HTTPStatus = None, **details):
        super().__init__(message)
        self.message = message
        self.details = details
        if status is not None:
            self.status = status


class BadRequestError(ServiceError):
    status = HTTPStatus.BAD_REQUEST


class NotFoundError(ServiceError):
    status = HTTPStatus.NOT_FOUND
