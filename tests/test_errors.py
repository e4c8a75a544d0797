def test_404_json_envelope(client):
    resp = client.get('/no/such/route')
    assert resp.status_code == 404
    data = resp.get_json()
    assert data['status'] == 'error'
    assert data['code'] == 404
    assert isinstance(data.get('message'), str)


def test_unexpected_500_json_envelope(client):
    resp = client.get('/__boom')
    assert resp.status_code == 500
    data = resp.get_json()
    assert data['status'] == 'error'
    assert data['code'] == 500
    assert 'RuntimeError' not in data['message']
    assert 'boom' not in data['message']


def test_store_error_message_not_leaked(client):
    resp = client.get('/__store_boom')
    assert resp.status_code == 500
    data = resp.get_json()
    assert '10.0.0.5' not in data['message']
    assert data['message'].startswith('An unexpected error occurred')


def test_method_not_allowed_envelope(client):
    resp = client.put('/api/products')
    assert resp.status_code == 405
    assert resp.get_json()['code'] == 405


def test_ok_helper_endpoint(client):
    resp = client.get('/__ok')
    assert resp.status_code == 200
    data = resp.get_json()
    assert data == {
        'status': 'success',
        'message': 'success',
        'data': {'ping': 'pong'}
    }
