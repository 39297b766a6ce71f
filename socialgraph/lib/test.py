from django.conf import settings
from django.contrib.auth.models import User as DjangoUser
from django.core.cache import cache
from django.test import TestCase, Client

from group.models import Group
from user.models import User


class SocialGraphTestCase(TestCase):
    def setUp(self):
        # entities are cached across requests, so that each test starts with a cold cache
        cache.clear()

    def _create_user(self, username, name=None, is_superuser=False, **kwargs):
        account = DjangoUser.objects.create(username=username, is_superuser=is_superuser)
        account.set_password(username)
        account.save()

        return User.objects.create(account=account,
                                   username=username,
                                   name=name if name is not None else username.capitalize(),
                                   email='%s@example.com' % username,
                                   **kwargs)

    def _create_group(self, name, owner, **kwargs):
        return Group.objects.create(name=name, owner_guid=owner.guid, container_guid=owner.guid,
                                    **kwargs)


class SocialGraphViewTest(SocialGraphTestCase):
    def setUp(self):
        super(SocialGraphViewTest, self).setUp()

        self.client = Client()

        if hasattr(settings, 'SOCIALGRAPH') and 'ENABLE_PROFILE' in settings.SOCIALGRAPH:
            settings.SOCIALGRAPH['ENABLE_PROFILE'] = False

    def _do_login(self, uname, is_superuser=False, **kwargs):
        # create test user to authenticate
        user = self._create_user(uname, is_superuser=is_superuser, **kwargs)

        self.client.login(username=uname, password=uname)

        return user

    def admin_login(self):
        return self._do_login('admin', True)

    def guest_login(self):
        return self._do_login('guest')
