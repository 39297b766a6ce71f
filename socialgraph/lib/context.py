from importlib import import_module

from .sticky import StickyForms


class RequestContext(object):
    """
    Per-request state handed to the SocialGraph handlers: who is viewing,
    what was submitted, and the sticky form store.
    """

    def __init__(self, request=None, viewer=None, params=None):
        self.request = request
        self.input = {}

        if params is not None:
            self.params = dict(params)
        elif request is not None:
            self.params = _collect_params(request)
        else:
            self.params = {}

        self._viewer = viewer
        self._viewer_resolved = viewer is not None or request is None
        self.sticky = StickyForms(request) if request is not None else None

    @property
    def viewer(self):
        if not self._viewer_resolved:
            self._viewer = get_logged_in_user(self.request)
            self._viewer_resolved = True
        return self._viewer

    @property
    def is_logged_in(self):
        return self.viewer is not None


def _collect_params(request):
    params = {}
    for query in (request.GET, request.POST):
        for key in query:
            values = query.getlist(key)
            params[key] = values if len(values) > 1 or key.endswith('[]') else values[0]

    # PHP-style array parameters (match_on[]=users) are exposed without brackets
    for key in [x for x in params if x.endswith('[]')]:
        params.setdefault(key[:-2], params.pop(key))

    return params


def get_logged_in_user(request):
    if request is None or not request.user.is_authenticated:
        return None

    # Use importlib to prevent circular import
    User = import_module('user.models').User
    return User.objects.filter(account=request.user, enabled=True, banned=False).first()


def get_context(request):
    if not hasattr(request, 'context'):
        request.context = RequestContext(request)
    return request.context
