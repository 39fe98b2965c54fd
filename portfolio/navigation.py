from typing import List, Optional

from .models import Section

NAV_ITEMS = [
    {"id": "about-me", "label": "About me"},
    {"id": "my-projects", "label": "My projects"},
    {"id": "blog", "label": "Blog"},
    {"id": "contact", "label": "Contact"},
]

LOOKAHEAD = 100
SCROLLED_THRESHOLD = 10


def active_section(
    scroll_y: float,
    sections: List[Section],
    lookahead: float = LOOKAHEAD,
    current: Optional[str] = None,
) -> Optional[str]:
    """
    Id of the first section whose [top, top + height) holds scroll_y + lookahead.
    Keeps `current` when the position falls between or past all sections.
    """
    position = scroll_y + lookahead
    for section in sections:
        if section.top <= position < section.top + section.height:
            return section.id
    return current


def is_scrolled(scroll_y: float) -> bool:
    return scroll_y > SCROLLED_THRESHOLD
