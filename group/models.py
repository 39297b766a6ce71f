import logging

from django.db import models
from django.utils.html import strip_tags

from acl.models import AccessCollection
from entity.models import Entity, require_loaded
from relationship.models import Direction, Relationship
from socialgraph.lib.acl import ACCESS_PUBLIC
from user.models import users_in_order

from .signals import group_joined, group_left

Logger = logging.getLogger(__name__)


class Joinable(object):
    """
    The membership operations of an entity that users can join.
    """

    def join(self, user):
        raise NotImplementedError()

    def leave(self, user):
        raise NotImplementedError()

    def is_member(self, user=None, context=None):
        raise NotImplementedError()

    def list_members(self, limit=10, offset=0):
        raise NotImplementedError()

    def count_members(self):
        raise NotImplementedError()


class Group(Entity, Joinable):
    ENTITY_TYPE = Entity.TYPE_GROUP
    EXPORTABLE_VALUES = Entity.EXPORTABLE_VALUES + ['name', 'description', 'icontime', 'banner']

    name = models.CharField(max_length=255, db_index=True)
    description = models.TextField(blank=True, default='')

    # The access level of the group membership, ACCESS_PUBLIC means anyone can join
    membership = models.IntegerField(default=ACCESS_PUBLIC)

    icontime = models.IntegerField(default=0)
    banner = models.CharField(max_length=255, blank=True, default='')

    # The access collection whose members are the members of this group
    group_acl = models.OneToOneField(AccessCollection, null=True, related_name='group',
                                     on_delete=models.SET_NULL)

    def __init__(self, *args, **kwargs):
        if not args:
            kwargs.setdefault('access_id', ACCESS_PUBLIC)
        super(Group, self).__init__(*args, **kwargs)

    def save(self, *args, **kwargs):
        is_new = self._state.adding

        super(Group, self).save(*args, **kwargs)

        if is_new and not self.group_acl:
            self.group_acl = AccessCollection.objects.create(name='Group: %s' % self.name,
                                                             owner=self)
            super(Group, self).save(update_fields=['group_acl'])

    @property
    def username(self):
        return 'group:%d' % self.guid

    @property
    def brief_description(self):
        return strip_tags(self.description)

    def get_url(self):
        return '/groups/profile/%d' % self.guid

    def get_icon_url(self, size='medium'):
        if not self.icontime:
            return '/mod/groups/graphics/default%s.gif' % size
        return '/groups/icon/%d/%s/%d.jpg' % (self.guid, size, self.icontime)

    def is_public_membership(self):
        return self.membership == ACCESS_PUBLIC

    def can_comment(self, user=None):
        ret = super(Group, self).can_comment(user)
        if ret is not None:
            return ret
        return False

    # operations for membership
    @require_loaded
    def join(self, user):
        """
        Joins the user to this group. The group_joined signal is sent after
        the relationship is made, and only when the user was not a member.
        Joining again is a successful no-op.
        """
        (_, created) = Relationship.get_or_add(user, 'member', self)

        if created:
            Logger.info('user %d joined group %d' % (user.guid, self.guid))
            group_joined.send(sender=self.__class__, group=self, user=user)

        return True

    @require_loaded
    def leave(self, user):
        """
        Removes the user from this group. The group_left signal is sent
        before the relationship is removed, so that receivers can still use
        the group ACL on behalf of the leaving user.
        """
        group_left.send(sender=self.__class__, group=self, user=user)

        ret = Relationship.remove(user, 'member', self)
        if ret:
            Logger.info('user %d left group %d' % (user.guid, self.guid))

        return ret

    @require_loaded
    def is_member(self, user=None, context=None):
        if user is None and context is not None:
            user = context.viewer
        if not user:
            return False

        return Relationship.exists(user, 'member', self)

    @require_loaded
    def list_members(self, limit=10, offset=0):
        guids = Relationship.query('member', self, Direction.INCOMING, limit, offset)
        return users_in_order(guids)

    @require_loaded
    def count_members(self):
        return Relationship.count('member', self, Direction.INCOMING)

    def get_members(self, limit=10, offset=0, count_only=False):
        if count_only:
            return self.count_members()
        return self.list_members(limit, offset)

    # operations for the contents of this group
    @require_loaded
    def add_object(self, entity):
        entity.update(container_guid=self.guid)
        return True

    @require_loaded
    def remove_object(self, guid):
        entity = Entity.objects.filter(guid=guid, container_guid=self.guid).first()
        if not entity:
            return False

        entity.get_subclass_object().update(container_guid=entity.owner_guid)
        return True

    def _objects(self, subtype):
        queryset = Entity.objects.filter(type=Entity.TYPE_OBJECT,
                                         container_guid=self.guid,
                                         enabled=True)
        if subtype:
            queryset = queryset.filter(subtype=subtype)
        return queryset

    @require_loaded
    def list_objects(self, subtype='', limit=10, offset=0):
        return list(self._objects(subtype).order_by('-time_created', '-guid')[offset:offset + limit])

    @require_loaded
    def count_objects(self, subtype=''):
        return self._objects(subtype).count()
