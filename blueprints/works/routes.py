"""
Works Routes - Works index and individual work pages
"""

from flask import render_template, current_app, abort
from utils.data import get_work, get_works_grid, get_work_images
from utils.layout import columnize
from . import works_bp


@works_bp.route('')
def index():
    """Grid of project tiles"""
    return render_template('works/index.html', projects=get_works_grid())


@works_bp.route('/<slug>')
def detail(slug):
    """A single work, either as a plain page or as columned text plus images"""
    work = get_work(slug)
    if not work:
        abort(404)

    if work['layout'] != 'columns':
        return render_template('works/page.html', work=work)

    layout = columnize(
        work['paragraphs'],
        column_width=current_app.config.get('LAYOUT_COLUMN_WIDTH', 200),
        column_gap=current_app.config.get('LAYOUT_COLUMN_GAP', 40),
        viewport_height=current_app.config.get('LAYOUT_VIEWPORT_HEIGHT', 900),
    )
    current_app.logger.debug(f"Work {slug} laid out in {len(layout.columns)} columns")

    return render_template('works/columns.html',
                           work=work,
                           layout=layout,
                           images=get_work_images(work))
