# content/tests/test_filters.py

import copy

from django.test import SimpleTestCase

from content.filters import (
    ALL,
    NO_COLLECTION_KEY,
    NONE,
    ListCriteria,
    filter_resources,
    group_by_collection,
    with_positions,
)

BOOK = {'id': 'c1', 'name': 'كتاب التوحيد', 'collection_content_type': 'book'}
SERIES = {'id': 'c2', 'name': 'سلسلة الفقه', 'collection_content_type': 'audio'}


def item(pk, created_at, collection=None, **fields):
    data = {
        'id': pk,
        'title': f'مادة {pk}',
        'description': '',
        'type': 'pdf',
        'language': 'ar',
        'category': 'fiqh',
        'tags': [],
        'collection_id': collection['id'] if collection else None,
        'collection': collection,
        'created_at': created_at,
    }
    data.update(fields)
    return data


ITEMS = [
    item('r5', '2024-05-01T00:00:00+00:00', BOOK),
    item('r4', '2024-04-01T00:00:00+00:00'),
    item('r3', '2024-03-01T00:00:00+00:00', SERIES, type='audio', tags=['طهارة']),
    item('r2', '2024-02-01T00:00:00+00:00', BOOK, language='en', title='Kitab at-Tawhid'),
    item('r1', '2024-01-01T00:00:00+00:00', BOOK),
]


class CriteriaTests(SimpleTestCase):

    def test_from_query_params(self):
        criteria = ListCriteria.from_query_params({'q': ' توحيد ', 'category': 'all', 'type': 'pdf,audio'})
        self.assertEqual(criteria.query, 'توحيد')
        self.assertIsNone(criteria.category)
        self.assertEqual(criteria.resource_types, ('pdf', 'audio'))
        self.assertEqual(criteria.collection, ALL)


class FilterTests(SimpleTestCase):

    def ids(self, **criteria):
        return [i['id'] for i in filter_resources(ITEMS, ListCriteria(**criteria))]

    def test_query_matches_title_tags_and_collection_name(self):
        self.assertEqual(self.ids(query='tawhid'), ['r2'])
        self.assertEqual(self.ids(query='طهارة'), ['r3'])
        self.assertEqual(self.ids(query='التوحيد'), ['r5', 'r2', 'r1'])

    def test_language_and_type(self):
        self.assertEqual(self.ids(language='en'), ['r2'])
        self.assertEqual(self.ids(resource_types=('audio',)), ['r3'])

    def test_collection_filter(self):
        self.assertEqual(self.ids(collection=NONE), ['r4'])
        self.assertEqual(self.ids(collection='c2'), ['r3'])

    def test_content_type_uses_collection(self):
        self.assertEqual(self.ids(content_type='book'), ['r5', 'r2', 'r1'])

    def test_input_not_mutated(self):
        before = copy.deepcopy(ITEMS)
        filter_resources(ITEMS, ListCriteria(query='x'))
        group_by_collection(ITEMS)
        with_positions(ITEMS)
        self.assertEqual(ITEMS, before)


class GroupingTests(SimpleTestCase):

    def test_partition_and_order(self):
        groups = group_by_collection(ITEMS)
        self.assertEqual([g['key'] for g in groups], ['c1', NO_COLLECTION_KEY, 'c2'])
        self.assertEqual(sum(g['count'] for g in groups), len(ITEMS))

        book = groups[0]
        self.assertEqual([i['id'] for i in book['items']], ['r1', 'r2', 'r5'])
        self.assertEqual([i['position'] for i in book['items']], [1, 2, 3])
        self.assertEqual(book['collection'], BOOK)
        self.assertIsNone(groups[1]['collection'])

    def test_ties_keep_input_order(self):
        same_time = '2024-01-01T00:00:00+00:00'
        items = [item('a', same_time, BOOK), item('b', same_time, BOOK)]
        self.assertEqual([i['id'] for i in group_by_collection(items)[0]['items']], ['a', 'b'])

    def test_positions_come_from_universe(self):
        filtered = [ITEMS[0]]
        positioned = with_positions(filtered, universe=ITEMS)
        self.assertEqual(positioned[0]['position'], 3)
