PROFILE = 'profile'
SKILLS = 'skills'
PROJECTS = 'projects'
MESSAGES = 'messages'

RESOURCES = (PROFILE, SKILLS, PROJECTS, MESSAGES)

DEFAULT_PROFILE = {
    'name': 'Ahmed Aboelcode',
    'title': 'Full-Stack Developer',
    'bio': 'Passionate full-stack developer with expertise in creating responsive and user-friendly web applications.',
    'email': 'aboelcode@gmail.com',
    'location': 'Egypt',
}


def seed_documents():
    """Content written on first start for every resource that has no document yet."""
    return {
        PROFILE: dict(DEFAULT_PROFILE),
        SKILLS: [],
        PROJECTS: [],
        MESSAGES: [],
    }


def read_fallback(resource):
    """What the public API serves when a read-only resource has no document."""
    if resource == PROFILE:
        return dict(DEFAULT_PROFILE)
    return []
