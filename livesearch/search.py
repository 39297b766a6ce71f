"""
Live search matches users, groups and friends against a partial term for
autocompletion.

A record matches when its name starts with the term, or when one of the
following words of its name (or description) does. The queries are
parameterized, so '%' and '_' in the term are matched literally.
"""
import logging

from django.conf import settings
from django.db.models import Q

from acl.models import get_access_array
from entity.store import can_read
from group.models import Group
from relationship.models import Relationship
from socialgraph.lib.exceptions import BadRequest, Unauthorized
from user.models import User

Logger = logging.getLogger(__name__)

MATCH_USERS = 'users'
MATCH_GROUPS = 'groups'
MATCH_FRIENDS = 'friends'
MATCH_ALL = 'all'

CATEGORIES = [MATCH_USERS, MATCH_GROUPS, MATCH_FRIENDS]

DEFAULT_LIMIT = 10


def _config(key, default):
    if hasattr(settings, 'SOCIALGRAPH') and key in settings.SOCIALGRAPH:
        return settings.SOCIALGRAPH[key]
    return default


def sanitize_limit(value, default=DEFAULT_LIMIT):
    """
    Coerces the limit parameter to an integer between 1 and the configured maximum.
    """
    try:
        limit = int(value)
    except (TypeError, ValueError):
        limit = default

    return min(max(limit, 1), _config('LIVESEARCH_MAX_LIMIT', 50))


def _word_start(fields, term):
    query = Q()
    for field in fields:
        query |= Q(**{'%s__icontains' % field: ' ' + term})
    return query


class EntitySearchStore(object):
    """
    Runs the matching queries of each category against the database.
    """

    def _user_query(self, term):
        return (Q(name__istartswith=term) |
                _word_start(['name'], term) |
                Q(username__istartswith=term))

    def match_users(self, term, limit):
        return list(User.objects.filter(self._user_query(term),
                                        enabled=True,
                                        banned=False).order_by('guid')[:limit])

    def match_groups(self, term, limit, owner=None):
        queryset = Group.objects.filter(Q(name__istartswith=term) |
                                        _word_start(['name', 'description'], term),
                                        enabled=True)
        if owner is not None:
            queryset = queryset.filter(owner_guid=owner.guid)

        return list(queryset.order_by('guid')[:limit])

    def match_friends(self, user, term, limit):
        friends = Relationship.objects.filter(relationship='friend', subject_id=user.guid)

        return list(User.objects.filter(self._user_query(term),
                                        guid__in=friends.values('object_id'),
                                        enabled=True,
                                        banned=False).order_by('guid')[:limit])


class LiveSearch(object):
    def __init__(self, store=None, groups_enabled=None):
        self.store = store or EntitySearchStore()
        if groups_enabled is None:
            groups_enabled = _config('ENABLE_GROUPS', True)
        self.groups_enabled = groups_enabled

    def _categories(self, match_on):
        if not isinstance(match_on, (list, tuple)):
            match_on = [match_on]

        # all = users and groups
        if MATCH_ALL in match_on:
            match_on = [MATCH_USERS, MATCH_GROUPS]

        for category in match_on:
            if category not in CATEGORIES:
                raise BadRequest('livesearch: unknown match_on of %s' % category)

        return list(match_on)

    def search(self, viewer, term, match_on=MATCH_ALL, match_owner=False, limit=DEFAULT_LIMIT):
        """
        Returns the result records of every requested category, sorted by name.

        Unauthorized is raised when there is no viewer and BadRequest when the
        term is not a string or a category is unknown, in any case before
        anything is queried.
        """
        if viewer is None:
            raise Unauthorized('livesearch is only available to logged in users')

        if not isinstance(term, str):
            raise BadRequest('livesearch: term must be a single string')

        categories = self._categories(match_on)
        limit = sanitize_limit(limit)

        access_array = get_access_array(viewer)

        def readable(entities):
            return [x for x in entities if can_read(viewer, x, access_array)]

        results = []
        for category in categories:
            if category == MATCH_USERS:
                value_field = 'guid' if MATCH_GROUPS in categories else 'username'
                results += [self._user_record(x, value_field)
                            for x in readable(self.store.match_users(term, limit))]

            elif category == MATCH_GROUPS:
                # don't return results if groups aren't enabled
                if not self.groups_enabled:
                    continue

                owner = viewer if match_owner else None
                results += [self._group_record(x)
                            for x in readable(self.store.match_groups(term, limit, owner))]

            elif category == MATCH_FRIENDS:
                results += [self._user_record(x, 'username')
                            for x in readable(self.store.match_friends(viewer, term, limit))]

        Logger.debug('livesearch "%s" on %s found %d results' % (term, categories, len(results)))

        # sorted() is stable, so the same names keep the order they were found in
        return sorted(results, key=lambda x: x['name'])

    def _user_record(self, user, value_field):
        return {
            'type': 'user',
            'name': user.name,
            'desc': user.username,
            'guid': user.guid,
            'value': getattr(user, value_field),
            'icon': user.get_icon_url('tiny'),
            'url': user.get_url(),
        }

    def _group_record(self, group):
        return {
            'type': 'group',
            'name': group.name,
            'desc': group.brief_description,
            'guid': group.guid,
            'value': group.guid,
            'icon': group.get_icon_url('tiny'),
            'url': group.get_url(),
        }
