import pytest


@pytest.mark.parametrize('path, text', [
    ('/', 'Lakeside scene with people and trees'),
    ('/about', 'Leica Oskar Barnack Newcomer Award'),
    ('/contact', 'Send me a message'),
    ('/works', 'Project Six'),
])
def test_static_pages_render(client, path, text):
    response = client.get(path)
    assert response.status_code == 200
    assert text in response.get_data(as_text=True)


def test_contact_page_lists_details_and_form(client):
    html = client.get('/contact').get_data(as_text=True)
    assert '+15094056458' in html
    assert 'andrxwliu@gmail.com / aliu458@gatech.edu' in html
    assert 'action="/api/contact"' in html
    assert 'name="website"' in html


def test_columned_work_is_served_in_columns(client):
    response = client.get('/works/project-five')
    html = response.get_data(as_text=True)

    assert response.status_code == 200
    assert 'New Comer' in html
    assert 'class="first column ie"' in html
    assert 'Preparing content...' in html
    assert '--dynamic-container-width' in html
    assert 'js/dynamic-columns.js' in html
    assert html.count('class="imageElement ie"') == 9


def test_remote_images_point_at_media_bucket(client):
    html = client.get('/works/starry-night-2025').get_data(as_text=True)
    assert 'starrynight-2025-10-16/DSCF5995-Edit-720w.webp' in html
    assert 'October 16, 2025' in html
    assert html.count('data-remote-image') == 14


def test_plain_work_page(client):
    html = client.get('/works/project-three').get_data(as_text=True)
    assert '<h1 class="home-name">Project Three</h1>' in html
    assert 'Lorem ipsum dolor sit amet' in html


@pytest.mark.parametrize('path', ['/works/project-one', '/works/unknown', '/feed'])
def test_missing_pages_render_not_found(client, path):
    response = client.get(path)
    assert response.status_code == 404
    assert 'Page not found' in response.get_data(as_text=True)


def test_api_not_found_is_json(client):
    response = client.get('/api/unknown')
    assert response.status_code == 404
    assert response.get_json() == {'error': 'Not found'}


def test_api_method_not_allowed_is_json(client):
    response = client.put('/api/rsvp', json={})
    assert response.status_code == 405
    assert response.get_json() == {'error': 'Method not allowed'}


def test_sidebar_expanded_on_work_pages(client):
    html = client.get('/works/project-five').get_data(as_text=True)
    assert 'class="works-submenu expanded"' in html
    assert 'max-height: 70px' in html


def test_sidebar_collapsed_elsewhere(client):
    html = client.get('/about').get_data(as_text=True)
    assert 'class="works-submenu"' in html
    assert 'max-height: 0px' in html


def test_sidebar_marks_full_reload_link(client):
    html = client.get('/').get_data(as_text=True)
    assert 'href="/works/starry-night-2025"' in html
    assert 'data-full-reload' in html


def test_sitemap_lists_works(client):
    response = client.get('/sitemap.xml')
    xml = response.get_data(as_text=True)
    assert response.headers['Content-Type'].startswith('application/xml')
    assert '<loc>http://localhost/works/project-five</loc>' in xml
    assert '<loc>http://localhost/about</loc>' in xml


def test_robots_points_at_sitemap(client):
    text = client.get('/robots.txt').get_data(as_text=True)
    assert 'Disallow: /api/' in text
    assert 'Sitemap: http://localhost/sitemap.xml' in text


def test_health_check(client):
    response = client.get('/health')
    assert response.status_code == 200
    assert response.get_json()['status'] == 'ok'


def test_security_headers(client):
    response = client.get('/')
    assert response.headers['X-Content-Type-Options'] == 'nosniff'
    assert 'r2.dev' in response.headers['Content-Security-Policy']
