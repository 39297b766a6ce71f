from .context import get_context


class ContextMiddleware(object):
    """
    Attaches a RequestContext to each request and writes the pending sticky
    form changes to the response.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        context = get_context(request)

        response = self.get_response(request)

        if context.sticky is not None:
            context.sticky.apply(response)

        return response
