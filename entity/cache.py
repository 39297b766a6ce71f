from django.conf import settings
from django.core.cache import cache


def _cache_key(guid):
    return 'entity:%d' % int(guid)


def _timeout():
    if hasattr(settings, 'SOCIALGRAPH') and 'ENTITY_CACHE_TIMEOUT' in settings.SOCIALGRAPH:
        return settings.SOCIALGRAPH['ENTITY_CACHE_TIMEOUT']
    return 300


def cache_entity(entity):
    cache.set(_cache_key(entity.guid), entity, _timeout())


def retrieve_cached_entity(guid):
    return cache.get(_cache_key(guid))


def invalidate_cache_for_entity(guid):
    if guid:
        cache.delete(_cache_key(guid))
