def test_stats_counts_each_collection(client, auth_headers, project_data):
    client.post('/api/portfolio/projects', json=project_data, headers=auth_headers)
    client.post('/api/portfolio/projects', json=project_data, headers=auth_headers)
    client.post(
        '/api/portfolio/skills',
        json={'name': 'SQL', 'level': 70, 'category': 'Databases'},
        headers=auth_headers,
    )

    response = client.get('/api/portfolio/stats')

    assert response.status_code == 200
    assert response.json() == {
        'projects': 2,
        'skills': 1,
        'achievements': 0,
        'blogs': 0,
        'education': 0,
        'leadership': 0,
        'total': 3,
    }


def test_engagement_summary(client, make_blog):
    quiet = make_blog(title='Quiet')
    popular = make_blog(title='Popular')

    for _ in range(3):
        client.post(f"/api/portfolio/blogs/{popular['id']}/view")
    client.post(f"/api/portfolio/blogs/{popular['id']}/like", json={'userId': 'r1'})
    client.post(f"/api/portfolio/blogs/{quiet['id']}/comments", json={'author': 'A', 'content': 'nice'})

    summary = client.get('/api/portfolio/stats/engagement').json()

    assert summary['totalViews'] == 3
    assert summary['totalLikes'] == 1
    assert summary['totalComments'] == 1
    assert summary['totalEngagement'] == 5
    assert [p['title'] for p in summary['mostEngaged']] == ['Popular', 'Quiet']
    assert summary['mostEngaged'][0]['engagement'] == 4
