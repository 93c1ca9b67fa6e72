"""Project-wide DRF exception handler."""

from rest_framework.views import exception_handler


def api_exception_handler(exc, context):
    """
    Render framework errors with the same ``{"error": ...}`` body the views use.

    Field validation errors (dicts keyed by field name) are left untouched.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(response.data, dict) and set(response.data) == {'detail'}:
        response.data = {'error': str(response.data['detail'])}

    return response
