import json
import logging
import math

from portfolio_site.presentation.state import ALL_CATEGORIES, FormStatus

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE = 'https://via.placeholder.com/350x200'

PROFILE_LINKS = (
    ('github', 'github_url'),
    ('linkedin', 'linkedin_url'),
    ('facebook', 'facebook_url'),
    ('resume', 'resume_url'),
)


def display_order(item):
    order = item.get('display_order', 0) if isinstance(item, dict) else 0
    if isinstance(order, str):
        try:
            order = float(order)
        except ValueError:
            return 0
    if isinstance(order, bool) or not isinstance(order, (int, float)) or not math.isfinite(order):
        return 0
    return order


def sort_by_display_order(items):
    return sorted((i for i in items if isinstance(i, dict)), key=display_order)


def profile_view(profile):
    """Values for the fixed profile anchor points of the page."""
    view = {
        'name': profile.get('name', ''),
        'title': profile.get('title', ''),
        'bio': profile.get('bio') or '',
        'location': profile.get('location') or '',
        'email': profile.get('email') or '',
        'image': None,
        'links': {},
    }
    if profile.get('profile_image'):
        view['image'] = {'src': profile['profile_image'], 'alt': profile.get('name', '')}
    for key, field_name in PROFILE_LINKS:
        if profile.get(field_name):
            view['links'][key] = profile[field_name]
    return view


def filter_skills(skills, category):
    if category == ALL_CATEGORIES:
        return list(skills)
    return [s for s in skills if isinstance(s, dict) and s.get('category') == category]


def skill_categories(skills):
    categories = [ALL_CATEGORIES]
    for skill in sort_by_display_order(skills):
        category = skill.get('category')
        if category and category not in categories:
            categories.append(category)
    return categories


def skill_cards(skills, category=ALL_CATEGORIES):
    cards = []
    for skill in sort_by_display_order(filter_skills(skills, category)):
        cards.append({
            'name': skill.get('name', ''),
            'category': skill.get('category', ''),
            'icon': skill.get('icon'),
            'proficiency': skill.get('proficiency', 0),
            'width': f"{skill.get('proficiency', 0)}%",
        })
    return cards


def parse_technologies(technologies):
    """Technology tags of a project; stored either as a list or a JSON-encoded list."""
    if isinstance(technologies, list):
        return [str(t) for t in technologies]
    if not isinstance(technologies, str):
        return []
    try:
        parsed = json.loads(technologies)
    except ValueError:
        logger.error('Error parsing technologies: %r', technologies)
        return []
    if not isinstance(parsed, list):
        logger.error('Technologies is not a list: %r', technologies)
        return []
    return [str(t) for t in parsed]


def project_links(project):
    links = []
    if project.get('github_url'):
        links.append({'label': 'View on GitHub', 'href': project['github_url']})
    if project.get('live_url'):
        links.append({'label': 'Live Demo', 'href': project['live_url']})
    return links


def project_cards(projects):
    return [
        {
            'title': project.get('title', ''),
            'description': project.get('description', ''),
            'image_url': project.get('image_url') or PLACEHOLDER_IMAGE,
            'image_alt': project.get('title', ''),
            'featured': bool(project.get('featured')),
            'technologies': parse_technologies(project.get('technologies')),
            'links': project_links(project),
        }
        for project in sort_by_display_order(projects)
    ]


def contact_view(form):
    return {
        'name': form.name,
        'email': form.email,
        'message': form.message,
        'status': form.status.value,
        'status_message': form.status_message,
        'visible': form.status in (FormStatus.SUCCESS, FormStatus.ERROR),
    }


def page_view(state):
    return {
        'profile': profile_view(state.profile),
        'categories': skill_categories(state.skills),
        'active_category': state.active_category,
        'skills': skill_cards(state.skills, state.active_category),
        'projects': project_cards(state.projects),
        'contact': contact_view(state.contact),
        'used_fallback': state.used_fallback,
    }
