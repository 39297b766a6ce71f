from django.dispatch import Signal

# Sent after the 'member' relationship has been added, with group and user
group_joined = Signal()

# Sent before the 'member' relationship is removed, with group and user.
# Receivers still see the user as a member of the group.
group_left = Signal()
