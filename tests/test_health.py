def test_ping(client):
    response = client.get('/ping')
    assert response.status_code == 200
    assert response.text == 'pong'


def test_health(client):
    for path in ('/health', '/api/health'):
        response = client.get(path)
        assert response.status_code == 200
        assert response.json()['status'] == 'OK'


def test_root_lists_endpoints(client):
    data = client.get('/').json()
    assert data['endpoints']['portfolio'] == '/api/portfolio'


def test_request_id_is_echoed(client):
    response = client.get('/api/portfolio/stats', headers={'X-Request-ID': 'abc123'})
    assert response.headers['X-Request-ID'] == 'abc123'
    assert response.headers['X-Response-Time'].endswith('ms')


def test_missing_database_is_503():
    from fastapi.testclient import TestClient
    from main import app

    response = TestClient(app).get('/api/portfolio/stats')

    assert response.status_code == 503
    assert response.json()['code'] == 'DATABASE_UNAVAILABLE'


def test_unexpected_error_is_generic_500(mongo_db, monkeypatch):
    from fastapi.testclient import TestClient

    import blog
    import main
    from database import get_db

    def broken_summary(database):
        raise ZeroDivisionError('division by zero')

    logged = []
    monkeypatch.setattr(blog, 'engagement_summary', broken_summary)
    monkeypatch.setattr(main.logger, 'log_error_with_context',
                        lambda error, context=None, **kwargs: logged.append((error, context)))
    main.app.dependency_overrides[get_db] = lambda: mongo_db
    try:
        response = TestClient(main.app, raise_server_exceptions=False).get('/api/portfolio/stats/engagement')
    finally:
        main.app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {'message': 'Server error', 'code': 'INTERNAL_ERROR', 'details': {}}
    assert 'division by zero' not in response.text
    assert len(logged) == 1
    assert isinstance(logged[0][0], ZeroDivisionError)
    assert logged[0][1] == 'GET /api/portfolio/stats/engagement'
