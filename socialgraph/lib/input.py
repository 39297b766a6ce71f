"""
Parameter input functions.

Request parameters are read through the per-request context rather than from
module state. Anything read with get_input() is passed through filter_tags(),
which triggers the ('validate', 'input') plugin hook. The default handler for
that hook strips HTML tags, and plugins may register stricter handlers.
"""
from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.utils.html import strip_tags

from .hooks import register_plugin_hook, trigger_plugin_hook


def get_input(context, variable, default=None, filter_result=True):
    """
    Returns the value of a submitted GET/POST variable, or default.

    Values set with set_input() take precedence over the request parameters.
    Strings are trimmed; lists are returned as submitted.
    """
    if variable in context.input:
        result = context.input[variable]
    elif variable in context.params:
        result = context.params[variable]
        if isinstance(result, str):
            result = result.strip()
    else:
        return default

    if filter_result:
        result = filter_tags(result)

    return result


def set_input(context, variable, value):
    if isinstance(value, (list, tuple)):
        value = [x.strip() if isinstance(x, str) else x for x in value]
    elif isinstance(value, str):
        value = value.strip()

    context.input[variable.strip()] = value


def filter_tags(var):
    """
    Filters anything that is not an object (strings, numbers, lists and dicts
    of them) through the registered input validators.
    """
    return trigger_plugin_hook('validate', 'input', None, var)


def is_email_address(address):
    try:
        validate_email(address)
    except ValidationError:
        return False
    return True


def _strip_tags_recursive(value):
    if isinstance(value, str):
        return strip_tags(value)
    if isinstance(value, (list, tuple)):
        return [_strip_tags_recursive(x) for x in value]
    if isinstance(value, dict):
        return {k: _strip_tags_recursive(v) for (k, v) in value.items()}
    return value


def default_input_filter(hook, hook_type, returnvalue, params):
    return _strip_tags_recursive(returnvalue)


register_plugin_hook('validate', 'input', default_input_filter, priority=1)
