"""
Fixed display values for résumé pages.

These are constants of the page design, not résumé data: the skill category
order and headings, the cosmetic skill-level labels, the sidebar's fixed
personal skills, and contact icons.
"""

from typing import Dict, List, Tuple

# (SkillSet attribute, heading) in display order
SKILL_CATEGORIES: List[Tuple[str, str]] = [
    ("languages_frameworks", "Languages & Frameworks"),
    ("backend_databases", "Backend & Databases"),
    ("devops_tools", "DevOps & Tools"),
    ("approach", "Approach & Methodology"),
]

# Decorative proficiency labels; cycled, never derived from résumé data
SKILL_LEVELS: List[str] = [
    "Expert",
    "Advanced",
    "Proficient",
    "Intermediate",
    "Advanced",
    "Expert",
    "Proficient",
]

# Offset between categories when picking a level label
SKILL_LEVEL_CATEGORY_STRIDE = 10

# Always shown first in the personal skills sidebar
PERSONAL_SKILLS: List[str] = ["TEAMWORK", "CREATIVE", "INNOVATIVE", "COMMUNICATION"]

CONTACT_ICONS: Dict[str, str] = {
    "email": "📧",
    "phone": "📱",
    "linkedin": "💼",
    "portfolio": "🌐",
    "location": "📍",
}

SIDEBAR_LINK_TEXT: Dict[str, str] = {
    "linkedin": "LinkedIn Profile",
    "portfolio": "Portfolio",
}

# Document title shown with the detail page error view
NOT_FOUND_TITLE = "Resume Not Found"
