import json

# Shown when the API cannot be reached
FALLBACK_PROFILE = {
    'name': 'Ahmed Aboelcode',
    'title': 'Full-Stack Developer',
    'bio': 'Passionate full-stack developer with expertise in creating responsive and user-friendly web applications. Skilled in both front-end and back-end technologies.',
    'email': 'aboelcode@gmail.com',
    'location': 'Egypt',
    'github_url': 'https://github.com/aboelcode',
    'linkedin_url': 'https://linkedin.com/in/aboelcode',
    'facebook_url': 'https://facebook.com/aboelcode',
    'profile_image': 'https://via.placeholder.com/300',
    'resume_url': '#',
}

FALLBACK_SKILLS = [
    {'name': 'HTML', 'category': 'Frontend', 'proficiency': 90, 'icon': 'html5', 'display_order': 1},
    {'name': 'CSS', 'category': 'Frontend', 'proficiency': 85, 'icon': 'css3', 'display_order': 2},
    {'name': 'JavaScript', 'category': 'Frontend', 'proficiency': 90, 'icon': 'javascript', 'display_order': 3},
    {'name': 'Responsive Design', 'category': 'Frontend', 'proficiency': 85, 'icon': 'mobile', 'display_order': 4},
    {'name': 'Node.js', 'category': 'Backend', 'proficiency': 85, 'icon': 'node-js', 'display_order': 5},
    {'name': 'Express', 'category': 'Backend', 'proficiency': 80, 'icon': 'server', 'display_order': 6},
    {'name': 'SQLite', 'category': 'Database', 'proficiency': 75, 'icon': 'database', 'display_order': 7},
    {'name': 'PostgreSQL', 'category': 'Database', 'proficiency': 70, 'icon': 'database', 'display_order': 8},
    {'name': 'Git', 'category': 'Tools', 'proficiency': 85, 'icon': 'git', 'display_order': 9},
    {'name': 'Python', 'category': 'Programming', 'proficiency': 75, 'icon': 'python', 'display_order': 10},
]

FALLBACK_PROJECTS = [
    {
        'title': 'E-Commerce Platform',
        'description': 'A full-stack e-commerce platform with product catalog, shopping cart, and payment integration.',
        'image_url': 'https://via.placeholder.com/350x200',
        'github_url': 'https://github.com/aboelcode/ecommerce',
        'live_url': 'https://ecommerce-demo.aboelcode.com',
        'featured': True,
        'display_order': 1,
        'technologies': json.dumps(['Node.js', 'Express', 'SQLite', 'JavaScript', 'HTML', 'CSS']),
    },
    {
        'title': 'Task Management App',
        'description': 'A task management application to help users organize their work with features like task categories, due dates, and progress tracking.',
        'image_url': 'https://via.placeholder.com/350x200',
        'github_url': 'https://github.com/aboelcode/taskmanager',
        'live_url': 'https://taskmanager-demo.aboelcode.com',
        'featured': True,
        'display_order': 2,
        'technologies': json.dumps(['Node.js', 'Express', 'SQLite', 'JavaScript', 'HTML', 'CSS']),
    },
    {
        'title': 'Weather Dashboard',
        'description': 'A weather dashboard that displays current weather conditions and forecasts for multiple locations.',
        'image_url': 'https://via.placeholder.com/350x200',
        'github_url': 'https://github.com/aboelcode/weather',
        'live_url': 'https://weather-demo.aboelcode.com',
        'featured': False,
        'display_order': 3,
        'technologies': json.dumps(['JavaScript', 'HTML', 'CSS', 'Weather API']),
    },
]
