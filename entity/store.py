"""
The attribute store: typed entity rows looked up by guid, guarded by the
viewer's access, and cached until they are written or deleted.
"""
import logging

from acl.models import get_access_array
from socialgraph.lib.acl import has_access
from socialgraph.lib.exceptions import NotFound

from .cache import cache_entity, retrieve_cached_entity
from .models import Entity

Logger = logging.getLogger(__name__)


def can_read(viewer, entity, access_array=None):
    if access_array is None:
        access_array = get_access_array(viewer)

    return has_access(viewer.guid if viewer else None,
                      access_array,
                      entity.access_id,
                      entity.owner_guid,
                      entity.container_guid,
                      is_admin=bool(viewer and viewer.is_admin))


def get_entity(guid, viewer=None, type=None):
    """
    Returns the entity of guid as its typed class (User, Group, ...).

    NotFound is raised when there is no enabled entity of that guid (and type,
    when it is specified), or when the viewer is not permitted to read it.
    """
    try:
        guid = int(guid)
    except (TypeError, ValueError):
        raise NotFound('invalid guid (%s)' % guid)

    entity = retrieve_cached_entity(guid)
    if entity is None:
        base = Entity.objects.filter(guid=guid).first()
        if not base:
            raise NotFound('entity %d does not exist' % guid)

        entity = base.get_subclass_object()
        cache_entity(entity)

    if not entity.enabled or (type and entity.type != type):
        raise NotFound('entity %d does not exist' % guid)

    if not can_read(viewer, entity):
        Logger.debug('viewer %s is not permitted to read %s' % (viewer, entity))
        raise NotFound('entity %d does not exist' % guid)

    return entity


def put_entity(entity):
    entity.save()
    return entity.guid


def delete_entity(guid):
    base = Entity.objects.filter(guid=guid).first()
    if not base:
        return False

    base.get_subclass_object().delete()
    return True
