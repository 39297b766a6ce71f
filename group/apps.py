from django.apps import AppConfig


class GroupConfig(AppConfig):
    name = 'group'
    default_auto_field = 'django.db.models.AutoField'

    def ready(self):
        # connect the receivers which keep the group ACL in sync with the membership
        from . import handlers  # noqa: F401
