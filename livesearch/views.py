import logging

from django.http import HttpResponse
from django.http.response import JsonResponse

from socialgraph.lib.context import get_context
from socialgraph.lib.exceptions import BadRequest
from socialgraph.lib.http import error_response, http_get
from socialgraph.lib.input import get_input
from socialgraph.lib.profile import socialgraph_profile

from .search import LiveSearch, MATCH_ALL, DEFAULT_LIMIT

Logger = logging.getLogger(__name__)

TRUE_VALUES = ('1', 'true', 'yes', 'on')


def _as_bool(value):
    if isinstance(value, str):
        return value.strip().lower() in TRUE_VALUES
    return bool(value)


@http_get
@socialgraph_profile
def index(request):
    """
    /livesearch?term=<query>

    Other options include:
        match_on     string all or list of users|groups|friends
        match_owner  0/1
        limit        int, default is 10
    """
    context = get_context(request)

    # only return results to logged in users
    if not context.is_logged_in:
        return HttpResponse(status=401)

    term = get_input(context, 'term', get_input(context, 'q'))
    if not term:
        return HttpResponse()

    try:
        results = LiveSearch().search(context.viewer,
                                      term,
                                      match_on=get_input(context, 'match_on', MATCH_ALL),
                                      match_owner=_as_bool(get_input(context, 'match_owner', False)),
                                      limit=get_input(context, 'limit', DEFAULT_LIMIT))
    except BadRequest as e:
        Logger.warning(e.message)
        return error_response(e)

    return JsonResponse(results, safe=False)
