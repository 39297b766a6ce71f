import logging

from django.dispatch import receiver

from .signals import group_joined, group_left

Logger = logging.getLogger(__name__)


@receiver(group_joined)
def add_member_to_group_acl(sender, group, user, **kwargs):
    if group.group_acl:
        group.group_acl.add_member(user)
    else:
        Logger.warning('group %d has no access collection' % group.guid)


@receiver(group_left)
def remove_member_from_group_acl(sender, group, user, **kwargs):
    if group.group_acl:
        group.group_acl.remove_member(user)
