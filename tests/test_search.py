import pytest

from constants import CATEGORY_NAMES
from services import search
from services.search import (
    SearchTimeout,
    chunked,
    dedupe_matches,
    group_by_category,
    search_ingredients,
)
from services.vocabulary import InMemoryVocabularyStore
from utils import sanitize_ingredient_text

from conftest import VOCABULARY


def names(result):
    return [m.name for matches in result['matched'].values() for m in matches]


class AliasTableBroken(InMemoryVocabularyStore):
    def find_alias(self, texts):
        raise RuntimeError('unexpected driver error')


def test_chicken_broth_matches_exact(store):
    result = search_ingredients(['2 cups chicken broth'], store)
    assert list(result['matched']) == ['other']
    match = result['matched']['other'][0]
    assert match.name == 'Chicken Broth'
    assert match.match_type == 'exact'
    assert match.matched_term == 'chicken broth'
    assert match.amount == '2'
    assert match.unit == 'cups'
    assert result['unmatched'] == []


def test_plural_onions_match_singular_entry(store):
    result = search_ingredients(['3 large onions, diced'], store)
    match = result['matched']['vegetable'][0]
    assert match.name == 'Onion'
    assert match.match_type == 'exact'
    assert match.original_text == '3 large onions, diced'
    assert result['unmatched'] == []


def test_both_alternatives_are_matched(store):
    result = search_ingredients(['1 cup quinoa or brown rice'], store)
    assert names(result) == ['Quinoa', 'Brown Rice']
    assert result['total_matched'] == 2
    assert result['unmatched'] == []


def test_phrase_table_hit_does_not_drop_other_alternative():
    store = InMemoryVocabularyStore([(4, 'Quinoa', 4), (5, 'Brown Rice', 4)], phrases=['brown rice'])
    result = search_ingredients(['1 cup quinoa or brown rice'], store)
    assert names(result) == ['Quinoa', 'Brown Rice']


def test_unresolved_phrase_on_one_side_still_matches_the_other():
    store = InMemoryVocabularyStore([(4, 'Quinoa', 4)], phrases=['brown rice'])
    result = search_ingredients(['1 cup quinoa or brown rice'], store)
    assert names(result) == ['Quinoa']
    assert result['unmatched'] == []


@pytest.mark.parametrize('line', ['quinoa or xyzzy', 'xyzzy or quinoa'])
def test_one_resolving_alternative_is_enough(store, line):
    result = search_ingredients([line], store)
    assert names(result) == ['Quinoa']
    assert result['unmatched'] == []


def test_unknown_line_is_returned_verbatim(store):
    result = search_ingredients(['xyzzy unknown item 123'], store)
    assert result['matched'] == {}
    assert result['unmatched'] == ['xyzzy unknown item 123']
    assert result['total_unmatched'] == 1


def test_failed_extraction_marks_its_whole_batch_unmatched(store, monkeypatch):
    extract = search.extract_candidate_groups

    def flaky_extract(text, store=None):
        if text == 'BOOM':
            raise RuntimeError('extractor blew up')
        return extract(text, store)

    monkeypatch.setattr(search, 'extract_candidate_groups', flaky_extract)

    lines = ['onion', 'garlic', 'quinoa', 'basil', 'shrimp',
             'tomato', 'BOOM', 'berries', 'potatoes', 'olives',
             'cherries', 'xyzzy']
    result = search_ingredients(lines, store)

    assert names(result) == ['Onion', 'Garlic', 'Quinoa', 'Basil', 'Shrimp', 'Cherry']
    assert result['unmatched'] == ['tomato', 'BOOM', 'berries', 'potatoes', 'olives', 'xyzzy']


def test_failed_match_marks_only_that_line_unmatched():
    store = AliasTableBroken([(1, 'Onion', 2)])
    result = search_ingredients(['onion', 'xyzzy'], store)
    assert names(result) == ['Onion']
    assert result['unmatched'] == ['xyzzy']


def test_duplicate_ingredients_keep_earliest_line(store):
    result = search_ingredients(['2 garlic cloves', '1 tsp minced garlic'], store)
    assert result['total_matched'] == 1
    assert result['matched']['vegetable'][0].original_text == '2 garlic cloves'


def test_grouping_covers_each_match_once(store):
    lines = ['3 large onions', '1 cup quinoa', '2 garlic cloves', 'fresh basil', 'prawns', '4 onions']
    result = search_ingredients(lines, store)

    assert list(result['matched']) == ['vegetable', 'grain', 'spice', 'protein']
    ids = [m.ingredient_id for matches in result['matched'].values() for m in matches]
    assert len(ids) == len(set(ids)) == result['total_matched'] == 5
    for category, matches in result['matched'].items():
        assert all(CATEGORY_NAMES[m.category_id] == category for m in matches)


def test_search_is_idempotent(store):
    lines = ['2 cups chicken broth', 'scallions', 'xyzzy', '1 cup quinoa or brown rice']
    assert search_ingredients(lines, store) == search_ingredients(lines, store)


@pytest.mark.parametrize('ingredient_id, name, category_id', VOCABULARY)
def test_every_vocabulary_name_matches_itself(store, ingredient_id, name, category_id):
    result = search_ingredients([name], store)
    match = result['matched'][CATEGORY_NAMES[category_id]][0]
    assert match.ingredient_id == ingredient_id
    assert match.match_type == 'exact'


def test_alias_line_reports_alias(store):
    result = search_ingredients(['scallion'], store)
    match = result['matched']['vegetable'][0]
    assert match.name == 'Green Onion'
    assert match.match_type == 'alias'
    assert match.matched_alias == 'scallion'


def test_blank_lines_are_skipped(store):
    result = search_ingredients(['', '   ', 'onion'], store)
    assert result['total_matched'] == 1
    assert result['unmatched'] == []


def test_candidate_cap():
    store = InMemoryVocabularyStore([(1, 'Item', 7)])
    assert search_ingredients(['xyzzy blorp item'], store)['total_matched'] == 1
    capped = search_ingredients(['xyzzy blorp item'], store, max_candidates=1)
    assert capped['total_matched'] == 0
    assert capped['unmatched'] == ['xyzzy blorp item']


def test_deadline_raises_timeout(store):
    with pytest.raises(SearchTimeout):
        search_ingredients(['onion'], store, timeout=0)


def test_empty_input(store):
    assert search_ingredients([], store, timeout=0) == {
        'matched': {}, 'unmatched': [], 'total_matched': 0, 'total_unmatched': 0,
    }


def test_chunked():
    assert chunked(list(range(12)), 5) == [[0, 1, 2, 3, 4], [5, 6, 7, 8, 9], [10, 11]]
    assert chunked([], 5) == []


def test_group_by_category_uses_given_table(store):
    matches = search_ingredients(['onion', 'basil'], store)['matched']
    flat = dedupe_matches([m for ms in matches.values() for m in ms])
    grouped = group_by_category(flat, {2: 'veg', 6: 'herbs & spices'})
    assert list(grouped) == ['veg', 'herbs & spices']


def test_clean_copy_is_matched_and_raw_line_reported(store):
    lines = ['3 large onions\x07', 'xyzzy\x00', '\x00']
    result = search_ingredients(lines, store, clean=sanitize_ingredient_text)
    assert result['matched']['vegetable'][0].original_text == '3 large onions\x07'
    assert result['unmatched'] == ['xyzzy\x00']
    assert result['total_unmatched'] == 1
