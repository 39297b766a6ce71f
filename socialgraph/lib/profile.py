import atexit
import logging

from functools import wraps
from time import time

from profilehooks import FuncProfile
from profilehooks import AVAILABLE_PROFILERS
from profilehooks import profile

from django.conf import settings

Logger = logging.getLogger(__name__)


class SocialGraphProfiler(FuncProfile):
    Profiles = []

    @classmethod
    def show_result(kls):
        [p.print_stats() for p in kls.Profiles]

    @classmethod
    def reset(kls):
        kls.Profiles.clear()

    def __init__(self, *args, **kwargs):
        super(SocialGraphProfiler, self).__init__(*args, **kwargs)

        # unregister atexit handler
        atexit.unregister(self.atexit)

        # to show the stats during process execution
        self.Profiles.append(self)


def _is_enable():
    if (hasattr(settings, 'SOCIALGRAPH') and
        'ENABLE_PROFILE' in settings.SOCIALGRAPH and
        settings.SOCIALGRAPH['ENABLE_PROFILE']):
        return True

    return False


def socialgraph_profile(func):
    @wraps(func)
    def wrapper(request, *args, **kwargs):
        if not _is_enable():
            return func(request, *args, **kwargs)

        # reset Profiling status
        SocialGraphProfiler.reset()

        start = time()
        ret = profile(profiler=('socialgraph_profiler'), immediate=False)(func)(request, *args, **kwargs)
        elapsed = time() - start

        SocialGraphProfiler.show_result()

        Logger.info('(Profiling result: %fs) (user-id: %s) %s %s' %
                    (elapsed, request.user.id, request.method, request.path))

        return ret

    return wrapper


AVAILABLE_PROFILERS['socialgraph_profiler'] = SocialGraphProfiler
