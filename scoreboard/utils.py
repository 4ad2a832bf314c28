"""
Response envelope helpers
"""
from scoreboard.models import AjaxResponse


def ok_response(message: str, redirect: str) -> AjaxResponse:
    """
    Build a success envelope

    Example:
        >>> ok_response("Login succesful", "game").model_dump()
        {'result': 'OK', 'message': 'Login succesful', 'redirect': 'game'}
    """
    return AjaxResponse(result="OK", message=message, redirect=redirect)


def error_response(message: str, context: str) -> AjaxResponse:
    """Build an error envelope; `context` is one of registration, login, index"""
    return AjaxResponse(result="ERROR", message=message, redirect=context)
