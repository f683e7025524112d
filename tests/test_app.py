import app as app_module
from constants import MAX_INGREDIENT_LINES
from services import SqlVocabularyStore, VocabularyLookupError


def search(client, ingredients, **kwargs):
    return client.post('/api/ingredients/search', json={'ingredients': ingredients}, **kwargs)


def save(client, recipe_id, ingredients):
    return client.post('/api/ingredients/save', json={'recipe_id': recipe_id, 'ingredients': ingredients})


ONION_DETAIL = {
    'ingredient_id': 1,
    'original_text': '3 large onions, diced',
    'matched_term': 'onion',
    'match_type': 'exact',
    'amount': '3',
    'unit': 'large',
}


def test_search_chicken_broth(client):
    response = search(client, ['2 cups chicken broth'])
    assert response.status_code == 200
    data = response.get_json()
    match = data['matched']['other'][0]
    assert match['name'] == 'Chicken Broth'
    assert match['match_type'] == 'exact'
    assert match['matched_term'] == 'chicken broth'
    assert match['ingredient_id'] == 3
    assert data['unmatched'] == []
    assert data['total_matched'] == 1


def test_search_alternatives(client):
    data = search(client, ['1 cup quinoa or brown rice']).get_json()
    assert [m['name'] for m in data['matched']['grain']] == ['Quinoa', 'Brown Rice']
    assert data['total_unmatched'] == 0


def test_search_unmatched_line_echoed(client):
    data = search(client, ['xyzzy unknown item 123']).get_json()
    assert data['matched'] == {}
    assert data['unmatched'] == ['xyzzy unknown item 123']
    assert data['total_unmatched'] == 1


def test_categories_keep_first_appearance_order(client):
    data = search(client, ['1 cup quinoa', '3 large onions']).get_json()
    assert list(data['matched']) == ['grain', 'vegetable']


def test_search_alias_from_database(client):
    data = search(client, ['4 scallions, thinly sliced']).get_json()
    match = data['matched']['vegetable'][0]
    assert match['name'] == 'Green Onion'
    assert match['match_type'] == 'alias'
    assert match['matched_alias'] == 'scallion'


def test_search_two_word_phrase_from_database(client):
    data = search(client, ['1 roasting chicken']).get_json()
    assert data['unmatched'] == ['1 roasting chicken']

    data = search(client, ['2 tbsp olive oil']).get_json()
    assert data['matched']['other'][0]['name'] == 'Olive Oil'


def test_search_non_string_lines(client):
    data = search(client, [123, None, 'onion']).get_json()
    assert data['matched']['vegetable'][0]['name'] == 'Onion'
    assert data['unmatched'] == ['123']


def test_search_requires_ingredient_list(client):
    assert client.post('/api/ingredients/search', json={}).status_code == 400
    assert client.post('/api/ingredients/search', json={'ingredients': 'onion'}).status_code == 400
    assert client.post('/api/ingredients/search', json=['onion']).status_code == 400

    response = client.post('/api/ingredients/search', data='not json', content_type='text/plain')
    assert response.status_code == 400
    assert response.get_json() == {'error': 'Ingredients array is required'}


def test_search_rejects_oversized_request(client):
    response = search(client, ['onion'] * (MAX_INGREDIENT_LINES + 1))
    assert response.status_code == 400


def test_search_timeout(client, app, monkeypatch):
    monkeypatch.setitem(app.config, 'INGREDIENT_SEARCH_TIMEOUT', 0)
    response = search(client, ['onion'])
    assert response.status_code == 408
    assert 'error' in response.get_json()


def test_search_internal_error(client, monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError('boom')

    monkeypatch.setattr(app_module, 'search_ingredients', broken)
    response = search(client, ['onion'])
    assert response.status_code == 500
    assert response.get_json() == {'error': 'Internal server error'}


def test_failed_lookup_counts_as_miss(client, monkeypatch):
    def unavailable(self, names):
        raise VocabularyLookupError('ingredient table unavailable')

    monkeypatch.setattr(SqlVocabularyStore, 'find_ingredient', unavailable)
    data = search(client, ['scallion', 'onion']).get_json()
    assert [m['name'] for m in data['matched']['vegetable']] == ['Green Onion']
    assert data['unmatched'] == ['onion']


def test_token_required_when_configured(client, app, monkeypatch):
    monkeypatch.setitem(app.config, 'SEARCH_API_TOKEN', 'sekrit')

    assert search(client, ['onion']).status_code == 401
    assert search(client, ['onion'], headers={'Authorization': 'Bearer wrong'}).status_code == 401
    assert client.get('/api/ingredients/load/1').status_code == 401

    response = search(client, ['onion'], headers={'Authorization': 'Bearer sekrit'})
    assert response.status_code == 200


def test_save_and_load(client):
    response = save(client, 1, [ONION_DETAIL])
    assert response.status_code == 200
    assert response.get_json() == {'success': True, 'recipe_id': 1, 'saved_count': 1}

    data = client.get('/api/ingredients/load/1').get_json()
    assert data['recipe_id'] == 1
    [detail] = data['ingredients']
    assert detail['original_text'] == '3 large onions, diced'
    assert detail['match_type'] == 'exact'
    assert detail['matched_alias'] is None
    assert detail['amount'] == '3'
    assert detail['ingredient'] == {
        'ingredient_id': 1, 'name': 'Onion', 'category_id': 2, 'category': 'vegetable',
    }


def test_save_replaces_previous_matches(client):
    save(client, 1, [ONION_DETAIL])
    scallion = {
        'ingredient_id': 12,
        'original_text': '2 scallions',
        'matched_term': 'scallions',
        'match_type': 'alias',
        'matched_alias': 'scallion',
    }
    response = save(client, 1, [scallion, dict(ONION_DETAIL, ingredient_id=11)])
    assert response.get_json()['saved_count'] == 2

    details = client.get('/api/ingredients/load/1').get_json()['ingredients']
    assert [d['ingredient']['name'] for d in details] == ['Green Onion', 'Red Onion']
    assert details[0]['matched_alias'] == 'scallion'


def test_save_empty_list_clears_matches(client):
    save(client, 1, [ONION_DETAIL])
    assert save(client, 1, []).get_json()['saved_count'] == 0
    assert client.get('/api/ingredients/load/1').get_json()['ingredients'] == []


def test_save_unknown_recipe(client):
    assert save(client, 99, [ONION_DETAIL]).status_code == 404
    assert client.get('/api/ingredients/load/99').status_code == 404


def test_save_validation(client):
    assert client.post('/api/ingredients/save', json={'ingredients': []}).status_code == 400
    assert save(client, '1', [ONION_DETAIL]).status_code == 400
    assert save(client, 1, [{'match_type': 'exact'}]).status_code == 400
    assert save(client, 1, [dict(ONION_DETAIL, match_type='fuzzy')]).status_code == 400

    response = save(client, 1, [dict(ONION_DETAIL, ingredient_id=999)])
    assert response.status_code == 400
    assert '999' in response.get_json()['error']

    # Nothing was written by the rejected requests
    assert client.get('/api/ingredients/load/1').get_json()['ingredients'] == []


def analyze(client, recipe_id):
    return client.post('/api/ingredients/analyze', json={'recipe_id': recipe_id})


def test_analyze_matches_stored_lines(client):
    response = analyze(client, 1)
    assert response.status_code == 200
    data = response.get_json()
    assert data['recipe_id'] == 1
    assert list(data['matched']) == ['vegetable', 'other']
    assert [m['name'] for m in data['matched']['vegetable']] == ['Onion', 'Green Onion']
    assert data['matched']['other'][0]['name'] == 'Chicken Broth'
    assert data['unmatched'] == ['xyzzy unknown item 123']
    assert data['total_matched'] == data['saved_count'] == 3


def test_analyze_replaces_saved_matches(client):
    save(client, 1, [dict(ONION_DETAIL, ingredient_id=11)])
    analyze(client, 1)

    details = client.get('/api/ingredients/load/1').get_json()['ingredients']
    assert [d['ingredient']['name'] for d in details] == ['Onion', 'Green Onion', 'Chicken Broth']
    assert details[0]['original_text'] == '3 large onions, diced'
    assert details[1]['match_type'] == 'alias'
    assert details[1]['matched_alias'] == 'scallion'
    assert details[2]['amount'] == '2'
    assert details[2]['unit'] == 'cups'


def test_analyze_unknown_or_empty_recipe(client):
    assert analyze(client, 99).status_code == 404

    response = analyze(client, 2)
    assert response.status_code == 404
    assert response.get_json() == {'error': 'No ingredients found'}


def test_analyze_requires_recipe_id(client):
    assert client.post('/api/ingredients/analyze', json={}).status_code == 400
    assert analyze(client, 'one').status_code == 400


def test_analyze_timeout(client, app, monkeypatch):
    monkeypatch.setitem(app.config, 'INGREDIENT_SEARCH_TIMEOUT', 0)
    assert analyze(client, 1).status_code == 408
    assert client.get('/api/ingredients/load/1').get_json()['ingredients'] == []


def test_unmatched_lines_echoed_as_sent(client):
    long_line = 'xyzzy ' * 120
    data = search(client, [long_line, 'blorp\x07 quux']).get_json()
    assert data['unmatched'] == [long_line, 'blorp\x07 quux']


def test_matched_line_keeps_original_text(client):
    data = search(client, ['2 cups chicken\x00 broth']).get_json()
    match = data['matched']['other'][0]
    assert match['name'] == 'Chicken Broth'
    assert match['original_text'] == '2 cups chicken\x00 broth'
