__all__ = ['AccessType', 'has_access']

ACCESS_FRIENDS = -2
ACCESS_PRIVATE = 0
ACCESS_LOGGED_IN = 1
ACCESS_PUBLIC = 2


class AccessType(object):
    Friends = type('AccessTypeFriends', (object,),
                   {'id': ACCESS_FRIENDS, 'name': 'friends', 'label': 'Friends'})
    Private = type('AccessTypePrivate', (object,),
                   {'id': ACCESS_PRIVATE, 'name': 'private', 'label': 'Private'})
    LoggedIn = type('AccessTypeLoggedIn', (object,),
                    {'id': ACCESS_LOGGED_IN, 'name': 'logged_in', 'label': 'Logged in users'})
    Public = type('AccessTypePublic', (object,),
                  {'id': ACCESS_PUBLIC, 'name': 'public', 'label': 'Public'})

    @classmethod
    def all(cls):
        return [cls.Friends, cls.Private, cls.LoggedIn, cls.Public]

    @classmethod
    def get(cls, access_id):
        """
        Returns the builtin access type of access_id, or None when access_id
        refers to an access collection (custom ACL).
        """
        return next((x for x in cls.all() if x.id == access_id), None)


def has_access(viewer_guid, access_array, access_id, owner_guid, container_guid, is_admin=False):
    """
    Decides whether a viewer may read an entity.

    This depends only on its arguments. The viewer's access array (the set of
    access ids it belongs to, including access collections and, for friends
    access, the owners that have befriended it) is computed by the caller.
    The container grants no access of its own, group content is shared
    through the access collection of the group.
    """
    if is_admin or access_id == ACCESS_PUBLIC:
        return True

    if viewer_guid and viewer_guid == owner_guid:
        return True

    if access_id == ACCESS_FRIENDS:
        return ('friend', owner_guid) in access_array

    return access_id in access_array
