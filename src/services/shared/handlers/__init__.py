from .error_handlers import error_response, register_error_handlers
from .responses import json_response

__all__ = ["error_response", "json_response", "register_error_handlers"]
