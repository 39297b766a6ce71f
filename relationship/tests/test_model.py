from entity.models import Entity
from relationship.models import Direction, Relationship
from socialgraph.lib.exceptions import BadRequest
from socialgraph.lib.test import SocialGraphTestCase


class ModelTest(SocialGraphTestCase):
    def setUp(self):
        super(ModelTest, self).setUp()

        self._entities = [Entity.objects.create(subtype='node') for _ in range(0, 5)]

    def test_add_relationship(self):
        (e1, e2) = self._entities[:2]

        self.assertTrue(Relationship.add(e1, 'follow', e2))
        self.assertTrue(Relationship.exists(e1, 'follow', e2))

        # relationships are directed and typed
        self.assertFalse(Relationship.exists(e2, 'follow', e1))
        self.assertFalse(Relationship.exists(e1, 'friend', e2))

    def test_add_relationship_twice(self):
        (e1, e2) = self._entities[:2]

        self.assertTrue(Relationship.add(e1, 'follow', e2))
        self.assertTrue(Relationship.add(e1, 'follow', e2))

        self.assertEqual(Relationship.objects.filter(subject=e1, object=e2).count(), 1)

    def test_get_or_add(self):
        (e1, e2) = self._entities[:2]

        (rel, created) = Relationship.get_or_add(e1, 'follow', e2)
        self.assertTrue(created)

        (same_rel, created) = Relationship.get_or_add(e1.guid, 'follow', e2.guid)
        self.assertFalse(created)
        self.assertEqual(rel, same_rel)

    def test_self_relationship(self):
        e1 = self._entities[0]

        self.assertTrue(Relationship.add(e1, 'follow', e1))
        self.assertTrue(Relationship.exists(e1, 'follow', e1))

    def test_remove_relationship(self):
        (e1, e2) = self._entities[:2]
        Relationship.add(e1, 'follow', e2)

        self.assertTrue(Relationship.remove(e1, 'follow', e2))
        self.assertFalse(Relationship.exists(e1, 'follow', e2))

    def test_remove_nonexistent_relationship(self):
        (e1, e2) = self._entities[:2]

        self.assertFalse(Relationship.remove(e1, 'follow', e2))

    def test_query_outgoing(self):
        anchor = self._entities[0]
        for entity in self._entities[1:]:
            Relationship.add(anchor, 'follow', entity)

        # the most recently related entity comes first
        expected = [x.guid for x in reversed(self._entities[1:])]
        self.assertEqual(Relationship.query('follow', anchor, Direction.OUTGOING), expected)
        self.assertEqual(Relationship.query('follow', anchor, Direction.INCOMING), [])

    def test_query_incoming(self):
        anchor = self._entities[0]
        for entity in self._entities[1:]:
            Relationship.add(entity, 'member', anchor)

        expected = [x.guid for x in reversed(self._entities[1:])]
        self.assertEqual(Relationship.query('member', anchor.guid, Direction.INCOMING), expected)

    def test_query_with_limit_and_offset(self):
        anchor = self._entities[0]
        for entity in self._entities[1:]:
            Relationship.add(anchor, 'follow', entity)

        expected = [x.guid for x in reversed(self._entities[1:])]
        self.assertEqual(Relationship.query('follow', anchor, Direction.OUTGOING, limit=2),
                         expected[:2])
        self.assertEqual(Relationship.query('follow', anchor, Direction.OUTGOING, limit=2, offset=2),
                         expected[2:4])
        self.assertEqual(Relationship.query('follow', anchor, Direction.OUTGOING, limit=2, offset=10),
                         [])

    def test_query_with_invalid_params(self):
        anchor = self._entities[0]

        with self.assertRaises(BadRequest):
            Relationship.query('follow', anchor, 'sideways')
        with self.assertRaises(BadRequest):
            Relationship.query('follow', anchor, Direction.OUTGOING, limit=-1)
        with self.assertRaises(BadRequest):
            Relationship.count('follow', anchor, 'sideways')
        with self.assertRaises(BadRequest):
            Relationship.remove_all(anchor, direction='sideways')

    def test_count(self):
        anchor = self._entities[0]
        for entity in self._entities[1:]:
            Relationship.add(entity, 'member', anchor)
        Relationship.add(anchor, 'member', self._entities[1])

        self.assertEqual(Relationship.count('member', anchor, Direction.INCOMING), 4)
        self.assertEqual(Relationship.count('member', anchor, Direction.OUTGOING), 1)
        self.assertEqual(Relationship.count('friend', anchor, Direction.INCOMING), 0)

    def test_remove_all(self):
        (e1, e2, e3) = self._entities[:3]
        Relationship.add(e1, 'follow', e2)
        Relationship.add(e1, 'friend', e3)
        Relationship.add(e2, 'follow', e1)
        Relationship.add(e2, 'follow', e3)

        self.assertEqual(Relationship.remove_all(e1, verb='follow', direction=Direction.OUTGOING), 1)
        self.assertTrue(Relationship.exists(e1, 'friend', e3))
        self.assertTrue(Relationship.exists(e2, 'follow', e1))

        self.assertEqual(Relationship.remove_all(e1), 2)
        self.assertEqual(Relationship.objects.count(), 1)
