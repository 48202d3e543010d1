from .camel_model import CamelModel as CamelModel
from .http_response import api_response as api_response
from .http_response import bad_request_response as bad_request_response
from .http_response import domain_error_response as domain_error_response
from .http_response import error_response as error_response
from .http_response import internal_error_response as internal_error_response
from .http_response import parse_json_body as parse_json_body
from .http_response import redirect_response as redirect_response
from .http_response import validation_error_response as validation_error_response
from .request_context import caller_from_event as caller_from_event
from .request_context import path_parameter as path_parameter
from .request_context import query_parameter as query_parameter
