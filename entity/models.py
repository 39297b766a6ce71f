import json
import logging

from functools import wraps
from importlib import import_module

from django.db import models
from django.db.models.signals import post_delete
from django.db.models.signals import post_save
from django.dispatch import receiver

from socialgraph.lib.acl import ACCESS_PRIVATE
from socialgraph.lib.exceptions import InvalidState
from socialgraph.lib.hooks import trigger_plugin_hook

from .cache import invalidate_cache_for_entity

Logger = logging.getLogger(__name__)


class Lifecycle(object):
    UNLOADED = 'unloaded'
    LOADED = 'loaded'
    DELETED = 'deleted'


def require_loaded(func):
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        if self.lifecycle != Lifecycle.LOADED:
            raise InvalidState('%s() is not allowed on an entity in state "%s"' %
                               (func.__name__, self.lifecycle))
        return func(self, *args, **kwargs)
    return wrapper


class Entity(models.Model):
    TYPE_OBJECT = 'object'
    TYPE_USER = 'user'
    TYPE_GROUP = 'group'
    TYPE_SITE = 'site'
    TYPE_CHOICES = (
        (TYPE_OBJECT, 'object'),
        (TYPE_USER, 'user'),
        (TYPE_GROUP, 'group'),
        (TYPE_SITE, 'site'),
    )

    # The type that every instance of a sub-class has
    ENTITY_TYPE = None

    EXPORTABLE_VALUES = ['guid', 'type', 'subtype', 'owner_guid', 'container_guid',
                         'access_id', 'time_created', 'time_updated']

    guid = models.AutoField(primary_key=True)
    type = models.CharField(max_length=8, choices=TYPE_CHOICES, default=TYPE_OBJECT)
    subtype = models.CharField(max_length=50, blank=True, default='')
    owner_guid = models.IntegerField(default=0, db_index=True)
    container_guid = models.IntegerField(default=0, db_index=True)
    access_id = models.IntegerField(default=ACCESS_PRIVATE)
    enabled = models.BooleanField(default=True)
    time_created = models.DateTimeField(auto_now_add=True)
    time_updated = models.DateTimeField(auto_now=True)

    def __init__(self, *args, **kwargs):
        super(Entity, self).__init__(*args, **kwargs)
        if self.ENTITY_TYPE:
            self.type = self.ENTITY_TYPE

        self._deleted = False

        # (guid, type) as they were persisted, these never change afterwards
        self._persisted_identity = None

    @classmethod
    def from_db(cls, db, field_names, values):
        instance = super(Entity, cls).from_db(db, field_names, values)
        instance._persisted_identity = (instance.__dict__.get('guid'),
                                        instance.__dict__.get('type'))
        return instance

    def __str__(self):
        return '%s:%s' % (self.type, self.guid)

    @property
    def lifecycle(self):
        if self._deleted:
            return Lifecycle.DELETED
        if self._state.adding:
            return Lifecycle.UNLOADED
        return Lifecycle.LOADED

    def save(self, *args, **kwargs):
        if self._deleted:
            raise InvalidState('deleted entity %s can not be saved' % self)

        if (self._persisted_identity and
            self._persisted_identity != (self.guid, self.type)):
            raise InvalidState('guid and type of an entity can not be changed (was guid=%s, type=%s)' %
                               self._persisted_identity)

        super(Entity, self).save(*args, **kwargs)
        self._persisted_identity = (self.guid, self.type)

    @require_loaded
    def delete(self, *args, **kwargs):
        """
        Deletes this entity. Relationships it takes part in and its metadata
        are removed along with it.
        """
        guid = self.guid
        ret = super(Entity, self).delete(*args, **kwargs)

        self._deleted = True
        Logger.info('entity %s:%d is deleted' % (self.type, guid))

        return ret

    @require_loaded
    def update(self, **params):
        for (key, value) in params.items():
            setattr(self, key, value)
        self.save()

    def get_subclass_object(self):
        # Use importlib to prevent circular import
        if self.type == self.TYPE_USER:
            model = import_module('user.models').User
        elif self.type == self.TYPE_GROUP:
            model = import_module('group.models').Group
        else:
            return self

        if isinstance(self, model):
            return self
        return model.objects.get(guid=self.guid)

    # operations for metadata
    @require_loaded
    def get_metadata(self, name):
        values = [x.get_value() for x in self.metadata.filter(name=name)]
        if not values:
            return None
        return values[0] if len(values) == 1 else values

    @require_loaded
    def set_metadata(self, name, value, multiple=False):
        if not multiple:
            self.metadata.filter(name=name).delete()

        for item in (value if isinstance(value, (list, tuple)) else [value]):
            Metadata.objects.create(entity=self, name=name, value=json.dumps(item))

        invalidate_cache_for_entity(self.guid)
        return True

    @require_loaded
    def clear_metadata(self, name):
        (count, _) = self.metadata.filter(name=name).delete()

        invalidate_cache_for_entity(self.guid)
        return count > 0

    def get_url(self):
        return '/view/%d' % self.guid

    def get_icon_url(self, size='medium'):
        return '/_graphics/icons/default/%s.png' % size

    def can_comment(self, user=None):
        params = {'entity': self, 'user': user}
        return trigger_plugin_hook('permissions_check:comment', self.type, params, None)

    @require_loaded
    def export(self):
        exported = {}
        for key in self.EXPORTABLE_VALUES:
            value = getattr(self, key)
            if hasattr(value, 'timestamp'):
                value = int(value.timestamp())
            exported[key] = value
        return exported


class Metadata(models.Model):
    entity = models.ForeignKey(Entity, related_name='metadata', on_delete=models.CASCADE)
    name = models.CharField(max_length=255, db_index=True)

    # JSON encoded to keep the type of the value
    value = models.TextField()
    time_created = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ('id',)

    def get_value(self):
        return json.loads(self.value)


@receiver(post_save)
@receiver(post_delete)
def _invalidate_entity_cache(sender, instance, **kwargs):
    if isinstance(instance, Entity):
        invalidate_cache_for_entity(instance.guid)
    elif isinstance(instance, Metadata):
        invalidate_cache_for_entity(instance.entity_id)
