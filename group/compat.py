from entity.store import get_entity


class FriendableGroup(object):
    """
    Exposes a group through the legacy friend API, where befriending a group
    means joining it. New code should call the Group methods directly.
    """

    def __init__(self, group, context=None):
        self.group = group
        self.context = context

    def _user(self, user_guid):
        viewer = self.context.viewer if self.context else None
        return get_entity(user_guid, viewer=viewer, type='user')

    def add_friend(self, friend_guid):
        return self.group.join(self._user(friend_guid))

    def remove_friend(self, friend_guid):
        return self.group.leave(self._user(friend_guid))

    def is_friend(self):
        return self.group.is_member(context=self.context)

    def is_friends_with(self, user_guid):
        return self.group.is_member(self._user(user_guid))

    def is_friend_of(self, user_guid):
        return self.group.is_member(self._user(user_guid))

    def get_friends(self, subtype='', limit=10, offset=0):
        return self.group.list_members(limit, offset)

    def get_friends_of(self, subtype='', limit=10, offset=0):
        return self.group.list_members(limit, offset)

    def get_objects(self, subtype='', limit=10, offset=0):
        return self.group.list_objects(subtype, limit, offset)

    def get_friends_objects(self, subtype='', limit=10, offset=0):
        return self.group.list_objects(subtype, limit, offset)

    def count_objects(self, subtype=''):
        return self.group.count_objects(subtype)
