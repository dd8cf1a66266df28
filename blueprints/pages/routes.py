"""
Pages Routes - Public static pages
"""

from datetime import datetime
from flask import render_template, request, current_app, url_for
from utils.data import SITE_CONTACT, HOME_IMAGE, ABOUT, get_work_slugs
from . import pages_bp


@pages_bp.route('/')
def index():
    """Landing page - owner name and lead photograph"""
    return render_template('pages/home.html', image=HOME_IMAGE)


@pages_bp.route('/about')
def about():
    """Biography page"""
    return render_template('pages/about.html', about=ABOUT)


@pages_bp.route('/contact')
def contact():
    """Contact details and the message form"""
    return render_template('pages/contact.html', contact=SITE_CONTACT)


@pages_bp.route('/sitemap.xml')
def sitemap():
    """Generate sitemap for SEO"""
    base_url = request.url_root.rstrip('/')
    today = datetime.now().strftime('%Y-%m-%d')

    sitemap_entries = [
        {'loc': f'{base_url}/', 'changefreq': 'monthly', 'priority': '1.0'},
        {'loc': f'{base_url}{url_for("pages.about")}', 'changefreq': 'yearly', 'priority': '0.6'},
        {'loc': f'{base_url}{url_for("pages.contact")}', 'changefreq': 'yearly', 'priority': '0.5'},
        {'loc': f'{base_url}{url_for("works.index")}', 'changefreq': 'monthly', 'priority': '0.9'},
    ]
    for slug in get_work_slugs():
        sitemap_entries.append({
            'loc': f'{base_url}{url_for("works.detail", slug=slug)}',
            'changefreq': 'monthly',
            'priority': '0.8',
        })

    sitemap_xml = ['<?xml version="1.0" encoding="UTF-8"?>']
    sitemap_xml.append('<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">')

    for entry in sitemap_entries:
        sitemap_xml.append('<url>')
        sitemap_xml.append(f'<loc>{entry["loc"]}</loc>')
        sitemap_xml.append(f'<lastmod>{today}</lastmod>')
        sitemap_xml.append(f'<changefreq>{entry["changefreq"]}</changefreq>')
        sitemap_xml.append(f'<priority>{entry["priority"]}</priority>')
        sitemap_xml.append('</url>')

    sitemap_xml.append('</urlset>')

    response = current_app.make_response('\n'.join(sitemap_xml))
    response.headers['Content-Type'] = 'application/xml; charset=utf-8'
    return response


@pages_bp.route('/robots.txt')
def robots():
    """Generate robots.txt for SEO"""
    robots_txt = """User-agent: *
Allow: /
Allow: /works/
Disallow: /api/
Disallow: /admin/

Sitemap: """ + request.url_root.rstrip('/') + """/sitemap.xml"""

    response = current_app.make_response(robots_txt)
    response.headers['Content-Type'] = 'text/plain; charset=utf-8'
    return response
