from datetime import timedelta

import pytest
from bson import ObjectId

from auth import create_access_token
from conftest import ADMIN_EMAIL


def test_project_lifecycle(client, auth_headers):
    """Create, list, delete, then 404"""
    payload = {'title': 'X', 'subtitle': 'Y', 'description': 'Z', 'tech': [], 'highlights': []}
    created = client.post('/api/portfolio/projects', json=payload, headers=auth_headers)

    assert created.status_code == 201
    project = created.json()
    assert ObjectId.is_valid(project['id'])
    assert project['title'] == 'X'
    assert project['featured'] is False
    assert project['caseStudy'] == {'problem': '', 'approach': '', 'impact': ''}

    listed = client.get('/api/portfolio/projects').json()
    assert project['id'] in [p['id'] for p in listed]

    deleted = client.delete(f"/api/portfolio/projects/{project['id']}", headers=auth_headers)
    assert deleted.status_code == 200
    assert deleted.json()['success'] is True

    assert client.get(f"/api/portfolio/projects/{project['id']}").status_code == 404


def test_get_by_id_round_trip(client, auth_headers, project_data):
    created = client.post('/api/portfolio/projects', json=project_data, headers=auth_headers).json()
    fetched = client.get(f"/api/portfolio/projects/{created['id']}")

    assert fetched.status_code == 200
    assert fetched.json() == created


def test_create_missing_required_field(client, auth_headers, project_data):
    del project_data['subtitle']
    response = client.post('/api/portfolio/projects', json=project_data, headers=auth_headers)

    assert response.status_code == 400
    body = response.json()
    assert body['code'] == 'VALIDATION_ERROR'
    assert 'subtitle' in body['message']


@pytest.mark.parametrize('level', [-1, 101])
def test_skill_level_out_of_range(client, auth_headers, level):
    response = client.post(
        '/api/portfolio/skills',
        json={'name': 'Rust', 'level': level, 'category': 'Programming Languages'},
        headers=auth_headers,
    )
    assert response.status_code == 400


def test_skill_level_is_clamped_on_read(client, mongo_db):
    inserted = mongo_db['skill'].insert_one({'name': 'Legacy', 'level': 140, 'category': 'Backend', 'order': 0})

    response = client.get(f'/api/portfolio/skills/{inserted.inserted_id}')

    assert response.status_code == 200
    assert response.json()['level'] == 100


def test_partial_update_keeps_other_fields(client, auth_headers, project_data):
    created = client.post('/api/portfolio/projects', json=project_data, headers=auth_headers).json()

    response = client.put(
        f"/api/portfolio/projects/{created['id']}",
        json={'featured': True, 'liveUrl': 'https://example.com'},
        headers=auth_headers,
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated['featured'] is True
    assert updated['liveUrl'] == 'https://example.com'
    assert updated['title'] == project_data['title']
    assert updated['id'] == created['id']


def test_update_rejects_invalid_value(client, auth_headers):
    created = client.post(
        '/api/portfolio/skills',
        json={'name': 'Go', 'level': 50, 'category': 'Backend'},
        headers=auth_headers,
    ).json()

    response = client.put(f"/api/portfolio/skills/{created['id']}", json={'level': 500}, headers=auth_headers)

    assert response.status_code == 400
    assert client.get(f"/api/portfolio/skills/{created['id']}").json()['level'] == 50


def test_update_missing_id(client, auth_headers):
    response = client.put(f'/api/portfolio/education/{ObjectId()}', json={'degree': 'MSc'}, headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.parametrize('item_id', [str(ObjectId()), 'not-an-object-id'])
def test_delete_missing_id_is_not_found(client, auth_headers, item_id):
    response = client.delete(f'/api/portfolio/achievements/{item_id}', headers=auth_headers)
    assert response.status_code == 404
    assert response.json()['code'] == 'ACHIEVEMENT_NOT_FOUND'


def test_mutations_without_token_do_not_persist(client, mongo_db, project_data):
    response = client.post('/api/portfolio/projects', json=project_data)

    assert response.status_code == 401
    assert mongo_db['project'].count_documents({}) == 0


def test_mutations_with_expired_token_do_not_persist(client, mongo_db):
    token = create_access_token(
        {'sub': ADMIN_EMAIL, 'email': ADMIN_EMAIL, 'role': 'admin'},
        expires_delta=timedelta(minutes=-1),
    )
    response = client.post(
        '/api/portfolio/leadership',
        json={'title': 'Lead', 'organization': 'Club'},
        headers={'Authorization': f'Bearer {token}'},
    )

    assert response.status_code == 401
    assert mongo_db['leadership'].count_documents({}) == 0


def test_delete_requires_token(client, auth_headers, project_data):
    created = client.post('/api/portfolio/projects', json=project_data, headers=auth_headers).json()

    assert client.delete(f"/api/portfolio/projects/{created['id']}").status_code == 401
    assert client.get(f"/api/portfolio/projects/{created['id']}").status_code == 200


def test_projects_list_featured_first(client, auth_headers, project_data):
    client.get('/api/portfolio/projects')  # seed first so the list is deterministic
    plain = dict(project_data, title='Plain', order=0)
    featured = dict(project_data, title='Featured', order=99, featured=True)
    client.post('/api/portfolio/projects', json=plain, headers=auth_headers)
    client.post('/api/portfolio/projects', json=featured, headers=auth_headers)

    listed = client.get('/api/portfolio/projects').json()
    flags = [p['featured'] for p in listed]

    assert flags == sorted(flags, reverse=True)
    assert listed.index(next(p for p in listed if p['title'] == 'Featured')) < \
        listed.index(next(p for p in listed if p['title'] == 'Plain'))


def test_blog_create_ignores_engagement_fields(client, auth_headers):
    response = client.post(
        '/api/portfolio/blogs',
        json={'title': 'Hello', 'excerpt': 'First', 'views': 1000, 'likes': 50, 'likedBy': ['x']},
        headers=auth_headers,
    )

    assert response.status_code == 201
    post = response.json()
    assert post['views'] == 0
    assert post['likes'] == 0
    assert post['likedBy'] == []
    assert post['comments'] == []


def test_blog_update_keeps_engagement(client, auth_headers, make_blog):
    post = make_blog()
    client.post(f"/api/portfolio/blogs/{post['id']}/view")

    response = client.put(
        f"/api/portfolio/blogs/{post['id']}",
        json={'title': 'Renamed', 'views': 0},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()['title'] == 'Renamed'
    assert response.json()['views'] == 1


def test_blog_list_published_filter(client, make_blog):
    client.get('/api/portfolio/blogs')
    draft = make_blog(published=False)

    published = client.get('/api/portfolio/blogs', params={'published': 'true'}).json()
    everything = client.get('/api/portfolio/blogs').json()

    assert draft['id'] not in [p['id'] for p in published]
    assert draft['id'] in [p['id'] for p in everything]
