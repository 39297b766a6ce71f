from django.db import models

from entity.models import Entity
from relationship.models import Relationship
from socialgraph.lib.acl import ACCESS_LOGGED_IN, ACCESS_PUBLIC


class AccessCollection(models.Model):
    """
    A named set of users that can be used as the access level of entities
    (a custom ACL). Its access id never collides with the builtin levels.
    """
    name = models.CharField(max_length=200)
    owner = models.ForeignKey(Entity, null=True, related_name='owned_access_collections',
                              on_delete=models.CASCADE)
    members = models.ManyToManyField('user.User', related_name='access_collections')
    time_created = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.name

    @property
    def access_id(self):
        return self.id + ACCESS_PUBLIC

    def add_member(self, user):
        self.members.add(user)

    def remove_member(self, user):
        self.members.remove(user)

    def has_member(self, user):
        return self.members.filter(guid=user.guid).exists()


def get_access_array(user):
    """
    Returns the access ids that the user belongs to. Anonymous viewers only
    belong to ACCESS_PUBLIC.
    """
    if user is None:
        return set([ACCESS_PUBLIC])

    access_array = set([ACCESS_PUBLIC, ACCESS_LOGGED_IN])
    access_array |= set(x.access_id for x in AccessCollection.objects.filter(
        models.Q(members__guid=user.guid) | models.Q(owner__guid=user.guid)))

    # owners who have befriended the user share their friends-only entities
    access_array |= set(('friend', x) for x in Relationship.objects.filter(
        relationship='friend', object_id=user.guid).values_list('subject_id', flat=True))

    return access_array
