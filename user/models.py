from importlib import import_module

from django.conf import settings
from django.db import models

from entity.models import Entity, require_loaded
from relationship.models import Direction, Relationship
from socialgraph.lib.acl import ACCESS_PUBLIC
from socialgraph.lib.exceptions import BadRequest


class User(Entity):
    ENTITY_TYPE = Entity.TYPE_USER
    EXPORTABLE_VALUES = Entity.EXPORTABLE_VALUES + ['name', 'username']

    account = models.OneToOneField(settings.AUTH_USER_MODEL, null=True,
                                   related_name='entity', on_delete=models.SET_NULL)
    username = models.CharField(max_length=128, unique=True)
    name = models.CharField(max_length=255, db_index=True)
    email = models.CharField(max_length=255, blank=True, default='')
    banned = models.BooleanField(default=False)
    icontime = models.IntegerField(default=0)

    def __init__(self, *args, **kwargs):
        if not args:
            kwargs.setdefault('access_id', ACCESS_PUBLIC)
        super(User, self).__init__(*args, **kwargs)

    def save(self, *args, **kwargs):
        super(User, self).save(*args, **kwargs)

        # a user owns and contains itself
        if not self.owner_guid or not self.container_guid:
            self.owner_guid = self.container_guid = self.guid
            super(User, self).save(update_fields=['owner_guid', 'container_guid'])

    @property
    def is_admin(self):
        return bool(self.account and self.account.is_superuser)

    def get_url(self):
        return '/profile/%s' % self.username

    def get_icon_url(self, size='medium'):
        return '/avatar/view/%s/%s/%d' % (self.username, size, self.icontime)

    # operations for friends
    @require_loaded
    def add_friend(self, friend):
        if friend.guid == self.guid:
            raise BadRequest('a user can not befriend itself')
        return Relationship.add(self, 'friend', friend)

    @require_loaded
    def remove_friend(self, friend):
        return Relationship.remove(self, 'friend', friend)

    @require_loaded
    def is_friends_with(self, user):
        return Relationship.exists(self, 'friend', user)

    @require_loaded
    def is_friend_of(self, user):
        return Relationship.exists(user, 'friend', self)

    @require_loaded
    def list_friends(self, limit=10, offset=0):
        guids = Relationship.query('friend', self, Direction.OUTGOING, limit, offset)
        return users_in_order(guids)

    @require_loaded
    def count_friends(self):
        return Relationship.count('friend', self, Direction.OUTGOING)

    @require_loaded
    def list_groups(self, limit=10, offset=0):
        Group = import_module('group.models').Group

        guids = Relationship.query('member', self, Direction.OUTGOING, limit, offset)
        groups = Group.objects.in_bulk(guids)
        return [groups[x] for x in guids if x in groups and groups[x].enabled]


def users_in_order(guids):
    """
    Returns the enabled, non-banned users of guids in the order of guids.
    """
    users = User.objects.filter(guid__in=guids, enabled=True, banned=False).in_bulk()
    return [users[x] for x in guids if x in users]
