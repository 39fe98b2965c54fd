import math
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from .contact import CONTACT_INFO

NAME = "Kron"
HEADLINE = "Fullstack developer"
BIRTH_DATE = date(2009, 3, 21)
TIMEZONE = "Europe/Moscow"
AVAILABILITY = "Available for projects"

# same year length the frontend has always used
YEAR_SECONDS = 365.25 * 24 * 3600

TECH_STACK = ["Next.js", "NestJS", "TypeScript", "React", "Node.js", "PostgreSQL", "Docker"]

SOCIAL_LINKS = [
    {"name": "github", "icon": "🐱", "url": "https://github.com"},
    {"name": "linkedin", "icon": "💼", "url": "https://linkedin.com"},
    {"name": "telegram", "icon": "✈️", "url": "https://telegram.org"},
    {"name": "email", "icon": "✉️", "url": "mailto:example@example.com"},
]


def age(birth: date, now: datetime) -> int:
    born = datetime(birth.year, birth.month, birth.day, tzinfo=now.tzinfo)
    return math.floor((now - born).total_seconds() / YEAR_SECONDS)


def local_time(now: datetime, tz: str = TIMEZONE) -> str:
    return now.astimezone(ZoneInfo(tz)).strftime("%H:%M")


def profile(now: datetime | None = None) -> dict:
    now = now or datetime.now(timezone.utc)
    return {
        "name": NAME,
        "headline": HEADLINE,
        "age": age(BIRTH_DATE, now),
        "birth_date": BIRTH_DATE.isoformat(),
        "local_time": local_time(now),
        "availability": AVAILABILITY,
        "tech_stack": TECH_STACK,
        "social_links": SOCIAL_LINKS,
        "contact_info": CONTACT_INFO,
    }
