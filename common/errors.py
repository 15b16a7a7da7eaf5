from django.http import JsonResponse


class ApiError(Exception):
    """An error whose message is safe to show to the client."""

    status_code = 500
    default_message = 'An unexpected error occurred'

    def __init__(self, message=None, code=None):
        self.message = message or self.default_message
        self.code = code
        super().__init__(self.message)

    def as_response(self):
        body = {'message': self.message}
        if self.code:
            body['code'] = self.code
        return JsonResponse(body, status=self.status_code)


class ValidationError(ApiError):
    status_code = 400
    default_message = 'Invalid request'


class AuthError(ApiError):
    status_code = 401
    default_message = 'Authentication required'


class NotFoundError(ApiError):
    status_code = 404
    default_message = 'Not found'


class MethodNotAllowed(ApiError):
    status_code = 405
    default_message = 'Method not allowed'


class PersistenceError(ApiError):
    status_code = 500
    default_message = 'Failed to process your request. Please try again later.'
