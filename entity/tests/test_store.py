from django.core.cache import cache

from entity.cache import retrieve_cached_entity
from entity.models import Entity
from entity.store import delete_entity, get_entity, put_entity
from group.models import Group
from socialgraph.lib.acl import ACCESS_LOGGED_IN, ACCESS_PRIVATE, ACCESS_PUBLIC
from socialgraph.lib.exceptions import NotFound
from socialgraph.lib.test import SocialGraphTestCase
from user.models import User


class StoreTest(SocialGraphTestCase):
    def setUp(self):
        super(StoreTest, self).setUp()

        self._owner = self._create_user('owner')
        self._viewer = self._create_user('viewer')

    def test_get_typed_entity(self):
        group = self._create_group('hoge', self._owner)

        entity = get_entity(group.guid, self._viewer)
        self.assertIsInstance(entity, Group)
        self.assertEqual(entity.name, 'hoge')

        self.assertIsInstance(get_entity(self._owner.guid, self._viewer), User)

    def test_get_nonexistent_entity(self):
        with self.assertRaises(NotFound):
            get_entity(99999, self._viewer)
        with self.assertRaises(NotFound):
            get_entity('invalid', self._viewer)

    def test_get_entity_of_other_type(self):
        group = self._create_group('hoge', self._owner)

        self.assertEqual(get_entity(group.guid, self._viewer, type='group'), group)
        with self.assertRaises(NotFound):
            get_entity(group.guid, self._viewer, type='user')

    def test_get_disabled_entity(self):
        entity = Entity.objects.create(access_id=ACCESS_PUBLIC, enabled=False)

        with self.assertRaises(NotFound):
            get_entity(entity.guid, self._viewer)

    def test_private_entity(self):
        entity = Entity.objects.create(owner_guid=self._owner.guid, access_id=ACCESS_PRIVATE)

        self.assertEqual(get_entity(entity.guid, self._owner), entity)
        with self.assertRaises(NotFound):
            get_entity(entity.guid, self._viewer)
        with self.assertRaises(NotFound):
            get_entity(entity.guid)

    def test_private_entity_for_admin(self):
        admin = self._create_user('admin', is_superuser=True)
        entity = Entity.objects.create(owner_guid=self._owner.guid, access_id=ACCESS_PRIVATE)

        self.assertEqual(get_entity(entity.guid, admin), entity)

    def test_private_entity_for_container(self):
        entity = Entity.objects.create(owner_guid=self._owner.guid,
                                       container_guid=self._viewer.guid,
                                       access_id=ACCESS_PRIVATE)

        with self.assertRaises(NotFound):
            get_entity(entity.guid, self._viewer)

        self.assertEqual(get_entity(entity.guid, self._owner), entity)

    def test_logged_in_entity(self):
        entity = Entity.objects.create(owner_guid=self._owner.guid, access_id=ACCESS_LOGGED_IN)

        self.assertEqual(get_entity(entity.guid, self._viewer), entity)
        with self.assertRaises(NotFound):
            get_entity(entity.guid)

    def test_group_acl_entity(self):
        group = self._create_group('hoge', self._owner)
        entity = Entity.objects.create(owner_guid=self._owner.guid,
                                       container_guid=group.guid,
                                       access_id=group.group_acl.access_id)

        with self.assertRaises(NotFound):
            get_entity(entity.guid, self._viewer)

        group.join(self._viewer)
        self.assertEqual(get_entity(entity.guid, self._viewer), entity)

        group.leave(self._viewer)
        with self.assertRaises(NotFound):
            get_entity(entity.guid, self._viewer)

    def test_entity_is_cached(self):
        group = self._create_group('hoge', self._owner)
        cache.clear()

        get_entity(group.guid, self._viewer)

        self.assertEqual(retrieve_cached_entity(group.guid), group)

    def test_cache_is_invalidated_by_update(self):
        group = self._create_group('hoge', self._owner)
        get_entity(group.guid, self._viewer)

        group.update(name='fuga')

        self.assertIsNone(retrieve_cached_entity(group.guid))
        self.assertEqual(get_entity(group.guid, self._viewer).name, 'fuga')

    def test_cache_is_invalidated_by_access_change(self):
        entity = Entity.objects.create(owner_guid=self._owner.guid, access_id=ACCESS_PUBLIC)
        get_entity(entity.guid, self._viewer)

        entity.update(access_id=ACCESS_PRIVATE)

        with self.assertRaises(NotFound):
            get_entity(entity.guid, self._viewer)

    def test_cache_is_invalidated_by_metadata(self):
        entity = Entity.objects.create(access_id=ACCESS_PUBLIC)
        get_entity(entity.guid)

        entity.set_metadata('tags', 'foo')
        self.assertIsNone(retrieve_cached_entity(entity.guid))

    def test_put_entity(self):
        entity = Entity(subtype='blog', access_id=ACCESS_PUBLIC)

        guid = put_entity(entity)

        self.assertEqual(guid, entity.guid)
        self.assertEqual(get_entity(guid).subtype, 'blog')

    def test_delete_entity(self):
        group = self._create_group('hoge', self._owner)
        get_entity(group.guid, self._viewer)

        self.assertTrue(delete_entity(group.guid))
        self.assertFalse(delete_entity(group.guid))

        self.assertIsNone(retrieve_cached_entity(group.guid))
        self.assertFalse(Group.objects.filter(guid=group.guid).exists())
        with self.assertRaises(NotFound):
            get_entity(group.guid, self._viewer)
