"""
Sticky forms keep the last submitted values of a form so that it can be
repopulated after a failed validation.

The values live in one signed cookie holding a JSON object keyed by form
name. Changes are collected on the StickyForms store during the request and
written to the response by socialgraph.lib.middleware.ContextMiddleware.
"""
import json
import logging

from django.conf import settings
from django.core import signing

from .input import filter_tags

Logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    'COOKIE_NAME': 'socialgraphStickyForm',
    'SALT': 'socialgraph.sticky',
    'SET_MAX_AGE': 60 * 60,
    'CLEAR_MAX_AGE': 60,
}


def get_config():
    config = dict(DEFAULT_CONFIG)
    if hasattr(settings, 'SOCIALGRAPH') and 'STICKY_FORM' in settings.SOCIALGRAPH:
        config.update(settings.SOCIALGRAPH['STICKY_FORM'])
    return config


class StickyForms(object):
    def __init__(self, request):
        self.config = get_config()
        self.forms = self._load(request)

        # max_age of the cookie that has to be sent back, None when unchanged
        self.pending_max_age = None

    def _load(self, request):
        try:
            raw = request.get_signed_cookie(self.config['COOKIE_NAME'], salt=self.config['SALT'])
        except KeyError:
            return {}
        except signing.BadSignature:
            Logger.warning('discarded sticky form cookie with a bad signature')
            return {}

        try:
            forms = json.loads(raw)
        except ValueError:
            Logger.warning('discarded malformed sticky form cookie')
            return {}

        return forms if isinstance(forms, dict) else {}

    def make_sticky(self, form_name, params):
        """
        Stores every submitted parameter of the form. The values are kept raw
        and are XSS filtered when they are read back.
        """
        self.forms[form_name] = dict(params)
        self.pending_max_age = self.config['SET_MAX_AGE']

    def clear_sticky(self, form_name):
        self.forms.pop(form_name, None)
        self.pending_max_age = self.config['CLEAR_MAX_AGE']

    def is_sticky(self, form_name):
        return form_name in self.forms

    def get_sticky_value(self, form_name, variable, default=None, filter_result=True):
        if variable not in self.forms.get(form_name, {}):
            return default

        value = self.forms[form_name][variable]
        if filter_result:
            value = filter_tags(value)
        return value

    def get_sticky_values(self, form_name, filter_result=True):
        if form_name not in self.forms:
            return None

        values = dict(self.forms[form_name])
        if filter_result:
            values = {k: filter_tags(v) for (k, v) in values.items()}
        return values

    def clear_sticky_value(self, form_name, variable):
        self.forms.get(form_name, {}).pop(variable, None)
        self.pending_max_age = self.config['CLEAR_MAX_AGE']

    def apply(self, response):
        if self.pending_max_age is None:
            return response

        response.set_signed_cookie(self.config['COOKIE_NAME'],
                                   json.dumps(self.forms),
                                   salt=self.config['SALT'],
                                   max_age=self.pending_max_age,
                                   path='/',
                                   httponly=True)
        return response
