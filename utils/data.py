"""
Data Module - Site content: owner details and the works catalog
Works are plain dictionaries, looked up by slug from the routes and templates.
"""

from flask import current_app, url_for


SITE_CONTACT = {
    'tel': '+15094056458',
    'emails': ['andrxwliu@gmail.com', 'aliu458@gatech.edu'],
    'instagram': 'andweez',
    'github': 'aandrx',
}

HOME_IMAGE = {
    'src': 'images/homepage-image.jpg',
    'alt': 'Lakeside scene with people and trees',
    'width': 1024,
    'height': 836,
}

ABOUT = {
    'image': {
        'src': 'images/about-image.jpg',
        'alt': 'Portrait photo',
        'width': 760,
        'height': 507,
    },
    'paragraphs': [
        '<strong>Andrew Liu</strong>, born in 2006 in Richland, Washington, is an independent '
        'photographer currently based in Hangzhou. In 2024, Andrew participated in '
        '<em>Multi-Exposure: New Narrative in Photography</em> and <em>Redefine: Contemporary '
        'Portrait Photography</em>, and his photobook <em>New Comer</em> was published by '
        'Imageless Publishing. In the same year, he held a solo exhibition of his <em>New '
        'Comer</em> series at Place M in Tokyo. In 2023, he was honored with the Leica Oskar '
        'Barnack Newcomer Award and exhibited his work in the <em>Light and Shadows</em> '
        'exhibition as part of the Leica Oskar Barnack Award series.',
        'In 2024, Andrew participated in <em>Them</em>, a segment of the <em>Local Action</em> '
        'exhibitions at the Jimei·Arles International Photography Festival. That same year, his '
        'work was shortlisted for the Young Portfolio collection award by the Kiyosato Museum of '
        'Art in Japan. In 2021, he was shortlisted for the BarTur Photography Award.',
    ],
}

NEW_COMER_TEXT = [
    'I spent little time with my parents throughout my whole growth, less communication, long '
    'being alienated, thereby giving rise to a sense of staying in middle of nowhere. Every time '
    'when confronted with the built-in family issue, I would intend to shun away instinctively.',
    'In March 2020, I moved to Hangzhou to get rid of the anxieties as well as for career. There, '
    'I got well paid and gained inner peace eventually, but later the routine of job bored me '
    'beyond bearing.',
    'Out of the basic instinct as a photographer, I decided to explore the similar void of mind '
    'state among young people like me scattered in different cities, to see their faces as well '
    'as check over my deep self-doubt. Therefore, I post my personal photo project "New Comer" in '
    'Weibo, twitter-like social media in mainland China, and received more than 40 applicants.',
    'Before shooting, I predicted their inner drives to different cities: career, money, emotion '
    'issue, or just escaping family. In the process of shooting and communicating with them, I '
    'found my predictions well fit, but the point is that even I share a lot with most of them, I '
    'am still touched by every each individual, his or her willingness to thrive, trying to gain '
    'redemption in ways positive, or negative.',
]

LOREM_TEXT = [
    'Lorem ipsum dolor sit amet, consectetur adipiscing elit. Nam congue tortor eget pulvinar '
    'lobortis. Vestibulum ante ipsum primis in faucibus orci luctus et ultrices posuere cubilia '
    'curae; Nam ac dolor augue.',
    'Pellentesque habitant morbi tristique senectus et netus et malesuada fames ac turpis '
    'egestas. Proin pharetra nonummy pede. Mauris et orci. Aenean nec lorem. In porttitor. Donec '
    'laoreet nonummy augue.',
    'Suspendisse dui purus, scelerisque at, vulputate vitae, pretium mattis, nunc. Mauris eget '
    'neque at sem venenatis eleifend. Ut nonummy. Fusce aliquet pede non pede. Suspendisse '
    'dapibus lorem pellentesque magna.',
]

STARRY_NIGHT_FOLDER = 'starrynight-2025-10-16'
STARRY_NIGHT_IMAGES = [
    'DSCF5995-Edit',
    'DSCF6168-Edit',
    'DSCF6315-Edit-2',
    'DSCF6348-Edit',
    'DSCF6036-Edit',
    'DSCF6205-Edit',
    'DSCF5997-Edit',
    'DSCF6167-Edit',
    'DSCF6204-Edit',
    'DSCF5994-Edit',
    'DSCF6286-Edit',
    'DSCF6308-Edit',
    'DSCF6335-Edit',
    'DSCF6377-Edit',
]


def _local_image(filename, alt='', width=1024, height=836):
    return {'src': f'images/{filename}', 'alt': alt, 'width': width, 'height': height, 'remote': False}


# layout: 'columns' -> dynamic column text followed by an image strip
#         'page'    -> title header with plain paragraphs
WORKS = {
    'project-three': {
        'title': 'Project Three',
        'layout': 'page',
        'paragraphs': LOREM_TEXT,
        'images': [],
    },
    'project-four': {
        'title': 'Project Four',
        'layout': 'page',
        'paragraphs': LOREM_TEXT,
        'images': [],
    },
    'project-five': {
        'title': 'New Comer',
        'layout': 'columns',
        'paragraphs': NEW_COMER_TEXT,
        'images': [
            _local_image('test-image.jpg'),
            _local_image('test-image-2.jpg'),
            _local_image('homepage-image.jpg'),
            _local_image('placeholder-1.jpg', 'Project Five Image 4'),
            _local_image('placeholder-2.jpg', 'Project Five Image 5'),
            _local_image('placeholder-3.jpg', 'Project Five Image 6', 836, 1024),
            _local_image('placeholder-4.jpg', 'Project Five Image 7'),
            _local_image('placeholder-5.jpg', 'Project Five Image 8'),
            _local_image('placeholder-6.jpg', 'Project Five Image 9', 836, 1024),
        ],
    },
    'project-six': {
        'title': 'Project Six',
        'layout': 'page',
        'paragraphs': LOREM_TEXT,
        'images': [],
    },
    'starry-night-2025': {
        'title': 'Starry Night 2025',
        'layout': 'columns',
        'paragraphs': NEW_COMER_TEXT + ['October 16, 2025'],
        # Remote images; dimensions are read in the browser once they load
        'remote_images': STARRY_NIGHT_IMAGES,
        'image_alt': 'Starry Night',
        'images': [],
        'full_reload': True,
    },
}

# Tiles shown on the works index; only some of them have pages
WORKS_GRID = [
    {'id': 1, 'title': 'Project One', 'image': 'images/placeholder-1.jpg', 'slug': 'project-one'},
    {'id': 2, 'title': 'Project Two', 'image': 'images/placeholder-2.jpg', 'slug': 'project-two'},
    {'id': 3, 'title': 'Project Three', 'image': 'images/placeholder-3.jpg', 'slug': 'project-three'},
    {'id': 4, 'title': 'Project Four', 'image': 'images/placeholder-4.jpg', 'slug': 'project-four'},
    {'id': 5, 'title': 'Project Five', 'image': 'images/placeholder-5.jpg', 'slug': 'project-five'},
    {'id': 6, 'title': 'Project Six', 'image': 'images/placeholder-6.jpg', 'slug': 'project-six'},
]

# Works listed in the sidebar submenu, in display order
SIDEBAR_WORKS = [
    {'id': 4, 'title': 'Starry Night 2025', 'slug': 'starry-night-2025'},
    {'id': 5, 'title': 'Project Five', 'slug': 'project-five'},
]


def get_work(slug):
    """Return the work registered under ``slug`` or None"""
    work = WORKS.get(slug)
    if work is None:
        return None
    return dict(work, slug=slug)


def get_work_slugs():
    return list(WORKS.keys())


def get_sidebar_works():
    return [
        dict(item, href=f'/works/{item["slug"]}', full_reload=WORKS.get(item['slug'], {}).get('full_reload', False))
        for item in SIDEBAR_WORKS
    ]


def get_works_grid():
    return [dict(item, href=f'/works/{item["slug"]}') for item in WORKS_GRID]


def media_url(filename, folder=STARRY_NIGHT_FOLDER, width=720):
    """Public URL of a resized image in the media bucket"""
    base_url = current_app.config.get('MEDIA_BASE_URL', '').rstrip('/')
    return f'{base_url}/{folder}/{filename}-{width}w.webp'


def get_work_images(work):
    """Resolve a work's images to template-ready dictionaries with URLs"""
    images = []
    for image in work.get('images', []):
        images.append(dict(image, url=url_for('static', filename=image['src'])))
    for filename in work.get('remote_images', []):
        images.append({
            'url': media_url(filename),
            'alt': f"{work.get('image_alt', work['title'])} {filename}",
            'width': None,
            'height': None,
            'remote': True,
        })
    return images


__all__ = [
    'SITE_CONTACT',
    'HOME_IMAGE',
    'ABOUT',
    'WORKS',
    'WORKS_GRID',
    'SIDEBAR_WORKS',
    'get_work',
    'get_work_slugs',
    'get_sidebar_works',
    'get_works_grid',
    'media_url',
    'get_work_images',
]
