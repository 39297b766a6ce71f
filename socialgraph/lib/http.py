from functools import wraps

from django.http import HttpResponse

from .context import get_context
from .exceptions import SocialGraphError


def http_get(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        request = args[0]
        if request.method != 'GET':
            return HttpResponse('Invalid HTTP method is specified', status=400)

        return func(*args, **kwargs)
    return wrapper


def http_post_form(validator, sticky_form=None):
    """
    Accepts form-encoded POST requests from logged in users whose parameters
    satisfy the validator. When validation fails and sticky_form is set, the
    submitted values are kept so that the form can be repopulated.
    """
    def _decorator(func):
        @wraps(func)
        def http_post_handler(*args, **kwargs):
            request = args[0]

            if request.method != 'POST':
                return HttpResponse('Invalid HTTP method is specified', status=400)

            context = get_context(request)
            if not context.is_logged_in:
                return HttpResponse('You have to login to execute this operation', status=401)

            if not _is_valid(context.params, validator):
                if sticky_form:
                    context.sticky.make_sticky(sticky_form, context.params)
                return HttpResponse('Invalid parameters are specified', status=400)

            if sticky_form:
                context.sticky.clear_sticky(sticky_form)

            kwargs['context'] = context
            return func(*args, **kwargs)
        return http_post_handler
    return _decorator


def error_response(err):
    return HttpResponse(err.message, status=err.status, content_type='text/plain')


def handle_errors(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SocialGraphError as e:
            return error_response(e)
    return wrapper


def _is_valid(params, meta_info):
    if not isinstance(params, dict):
        return False
    # These are existance checks of each parameters
    if not all([x['name'] in params for x in meta_info if x.get('required', True)]):
        return False
    # These are type checks of each parameters
    if not all([isinstance(params[x['name']], x['type']) for x in meta_info if x['name'] in params]):
        return False
    # These are value checks of each parameters
    for _meta in meta_info:
        if _meta['name'] in params and 'checker' in _meta and not _meta['checker'](params):
            return False

    return True
