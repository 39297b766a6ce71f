import logging

from django.db import IntegrityError
from django.db import models
from django.db import transaction

from entity.models import Entity
from socialgraph.lib.exceptions import BadRequest

Logger = logging.getLogger(__name__)


class Direction(object):
    # the anchor is the subject of the relationships
    OUTGOING = 'outgoing'
    # the anchor is the object of the relationships
    INCOMING = 'incoming'

    @classmethod
    def all(cls):
        return [cls.OUTGOING, cls.INCOMING]


def _guid(target):
    if isinstance(target, Entity):
        return target.guid
    return int(target)


class Relationship(models.Model):
    """
    A directed and typed edge between two entities, e.g. (user, 'member', group).
    """
    subject = models.ForeignKey(Entity, related_name='relationships_out', on_delete=models.CASCADE)
    relationship = models.CharField(max_length=50)
    object = models.ForeignKey(Entity, related_name='relationships_in', on_delete=models.CASCADE)
    time_created = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        unique_together = (('subject', 'relationship', 'object'),)

    def __str__(self):
        return '(%d, %s, %d)' % (self.subject_id, self.relationship, self.object_id)

    @classmethod
    def get_or_add(kls, subject, verb, obj):
        """
        Returns the relationship and whether it was created by this call.
        """
        params = {
            'subject_id': _guid(subject),
            'relationship': verb,
            'object_id': _guid(obj),
        }
        try:
            with transaction.atomic():
                return kls.objects.get_or_create(**params)
        except IntegrityError:
            # Another request made the same relationship at the same time
            return (kls.objects.get(**params), False)

    @classmethod
    def add(kls, subject, verb, obj):
        (rel, created) = kls.get_or_add(subject, verb, obj)
        if created:
            Logger.debug('relationship %s is added' % rel)
        return True

    @classmethod
    def remove(kls, subject, verb, obj):
        (count, _) = kls.objects.filter(subject_id=_guid(subject),
                                        relationship=verb,
                                        object_id=_guid(obj)).delete()
        return count > 0

    @classmethod
    def exists(kls, subject, verb, obj):
        return kls.objects.filter(subject_id=_guid(subject),
                                  relationship=verb,
                                  object_id=_guid(obj)).exists()

    @classmethod
    def _filter(kls, verb, anchor, direction):
        if direction not in Direction.all():
            raise BadRequest('invalid relationship direction (%s)' % direction)

        if direction == Direction.OUTGOING:
            return kls.objects.filter(relationship=verb, subject_id=_guid(anchor))
        return kls.objects.filter(relationship=verb, object_id=_guid(anchor))

    @classmethod
    def query(kls, verb, anchor, direction, limit=10, offset=0):
        """
        Returns guids of the entities at the other end of the relationships,
        the most recently related first.
        """
        if limit < 0 or offset < 0:
            raise BadRequest('limit and offset must not be negative')

        column = 'object_id' if direction == Direction.OUTGOING else 'subject_id'
        queryset = kls._filter(verb, anchor, direction).order_by('-time_created', '-id')

        return list(queryset.values_list(column, flat=True)[offset:offset + limit])

    @classmethod
    def count(kls, verb, anchor, direction):
        return kls._filter(verb, anchor, direction).count()

    @classmethod
    def remove_all(kls, target, verb=None, direction=None):
        if direction is not None and direction not in Direction.all():
            raise BadRequest('invalid relationship direction (%s)' % direction)

        guid = _guid(target)
        if direction == Direction.OUTGOING:
            queryset = kls.objects.filter(subject_id=guid)
        elif direction == Direction.INCOMING:
            queryset = kls.objects.filter(object_id=guid)
        else:
            queryset = kls.objects.filter(models.Q(subject_id=guid) | models.Q(object_id=guid))

        if verb:
            queryset = queryset.filter(relationship=verb)

        return queryset.delete()[0]
