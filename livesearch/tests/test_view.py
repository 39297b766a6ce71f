from socialgraph.lib.test import SocialGraphViewTest


class ViewTest(SocialGraphViewTest):
    def setUp(self):
        super(ViewTest, self).setUp()

        self._alice = self._create_user('alice', name='Ann Smith')
        self._create_group('Annual meeting', self._alice)

    def test_search_without_login(self):
        resp = self.client.get('/livesearch', {'term': 'ann'})

        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.content, b'')

    def test_search_without_term(self):
        self.guest_login()

        resp = self.client.get('/livesearch')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.content, b'')

    def test_search(self):
        self.guest_login()

        resp = self.client.get('/livesearch', {'term': ' ann '})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([x['name'] for x in resp.json()], ['Ann Smith', 'Annual meeting'])

        # 'q' is accepted as the term as well
        resp = self.client.get('/livesearch', {'q': 'ann', 'match_on': 'groups'})
        self.assertEqual([x['type'] for x in resp.json()], ['group'])

    def test_search_with_multiple_categories(self):
        user = self.guest_login()
        user.add_friend(self._alice)

        resp = self.client.get('/livesearch?term=ann&match_on[]=groups&match_on[]=friends')
        self.assertEqual(resp.status_code, 200)

        results = resp.json()
        self.assertEqual([x['name'] for x in results], ['Ann Smith', 'Annual meeting'])
        self.assertEqual(results[0]['value'], 'alice')

    def test_search_with_match_owner(self):
        user = self.guest_login()
        self._create_group('Anniversary', user)

        resp = self.client.get('/livesearch', {'term': 'ann', 'match_on': 'groups',
                                               'match_owner': '1'})
        self.assertEqual([x['name'] for x in resp.json()], ['Anniversary'])

    def test_search_with_unknown_category(self):
        self.guest_login()

        resp = self.client.get('/livesearch', {'term': 'ann', 'match_on': 'bogus'})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.content, b'livesearch: unknown match_on of bogus')

    def test_search_with_multiple_terms(self):
        self.guest_login()

        for query in ['term=ann&term=bob', 'term[]=ann']:
            resp = self.client.get('/livesearch?%s' % query)

            self.assertEqual(resp.status_code, 400)
            self.assertEqual(resp['Content-Type'], 'text/plain')
            self.assertEqual(resp.content, b'livesearch: term must be a single string')

    def test_search_with_invalid_method(self):
        self.guest_login()

        resp = self.client.post('/livesearch', {'term': 'ann'})
        self.assertEqual(resp.status_code, 400)
