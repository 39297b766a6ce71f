import unittest

from socialgraph.lib.acl import has_access
from socialgraph.lib.acl import ACCESS_FRIENDS, ACCESS_LOGGED_IN, ACCESS_PRIVATE, ACCESS_PUBLIC

OWNER = 10
CONTAINER = 20
VIEWER = 30

ANONYMOUS_ACCESS = set([ACCESS_PUBLIC])
VIEWER_ACCESS = set([ACCESS_PUBLIC, ACCESS_LOGGED_IN, 5])


class AccessTest(unittest.TestCase):
    def _check(self, viewer, access_array, access_id, **kwargs):
        return has_access(viewer, access_array, access_id, OWNER, CONTAINER, **kwargs)

    def test_public(self):
        self.assertTrue(self._check(None, ANONYMOUS_ACCESS, ACCESS_PUBLIC))
        self.assertTrue(self._check(VIEWER, VIEWER_ACCESS, ACCESS_PUBLIC))

    def test_logged_in(self):
        self.assertFalse(self._check(None, ANONYMOUS_ACCESS, ACCESS_LOGGED_IN))
        self.assertTrue(self._check(VIEWER, VIEWER_ACCESS, ACCESS_LOGGED_IN))

    def test_private(self):
        self.assertFalse(self._check(VIEWER, VIEWER_ACCESS, ACCESS_PRIVATE))
        self.assertTrue(self._check(OWNER, VIEWER_ACCESS, ACCESS_PRIVATE))
        self.assertTrue(self._check(VIEWER, VIEWER_ACCESS, ACCESS_PRIVATE, is_admin=True))

    def test_private_for_container(self):
        # the container of a private entity is not its owner
        self.assertFalse(self._check(CONTAINER, VIEWER_ACCESS, ACCESS_PRIVATE))
        self.assertFalse(self._check(CONTAINER, VIEWER_ACCESS, ACCESS_FRIENDS))

    def test_access_collection(self):
        self.assertTrue(self._check(VIEWER, VIEWER_ACCESS, 5))
        self.assertFalse(self._check(VIEWER, VIEWER_ACCESS, 6))

    def test_friends(self):
        self.assertFalse(self._check(VIEWER, VIEWER_ACCESS, ACCESS_FRIENDS))
        self.assertTrue(self._check(VIEWER, VIEWER_ACCESS | set([('friend', OWNER)]), ACCESS_FRIENDS))

    def test_deterministic(self):
        results = set(self._check(VIEWER, VIEWER_ACCESS, x)
                      for x in [ACCESS_PRIVATE] * 10)
        self.assertEqual(results, set([False]))
