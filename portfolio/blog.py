import asyncio
from datetime import datetime, timedelta, timezone
from typing import List

from .config import Settings
from .filters import category_options
from .models import Post

AUTHOR = "Uncle Kron"

_POSTS = [
    {
        "title": "Building a modern portfolio with Next.js",
        "excerpt": "A detailed guide to building a portfolio with Next.js, TypeScript and Tailwind CSS.",
        "image": "https://images.unsplash.com/photo-1620674156044-52b714665bee?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80",
        "tags": ["Next.js", "React", "TypeScript"],
        "read_time": 8,
        "slug": "building-portfolio-nextjs",
        "days_ago": 0,
    },
    {
        "title": "Web application performance tuning",
        "excerpt": "Practices for improving the performance of your React and Next.js applications.",
        "image": "https://images.unsplash.com/photo-1581276879432-15e50529f34b?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80",
        "tags": ["Optimization", "React", "Web Vitals"],
        "read_time": 12,
        "slug": "performance-tuning",
        "days_ago": 2,
    },
    {
        "title": "Introduction to NestJS for backend development",
        "excerpt": "The basics of NestJS, a progressive Node.js framework for building efficient server applications.",
        "image": "https://images.unsplash.com/photo-1555066931-4365d14bab8c?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80",
        "tags": ["NestJS", "Node.js", "Backend"],
        "read_time": 15,
        "slug": "introduction-to-nestjs",
        "days_ago": 5,
    },
    {
        "title": "TypeScript: from beginner to professional",
        "excerpt": "A complete TypeScript guide with good practices and advanced techniques.",
        "image": "https://images.unsplash.com/photo-1589652717521-10c0d092dea9?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80",
        "tags": ["TypeScript", "Programming"],
        "read_time": 20,
        "slug": "typescript-beginner-to-pro",
        "days_ago": 7,
    },
    {
        "title": "Docker for web developers",
        "excerpt": "Using Docker to simplify development and deployment of applications.",
        "image": "https://images.unsplash.com/photo-1589654443831-2fe9a79abb02?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80",
        "tags": ["Docker", "DevOps", "Deployment"],
        "read_time": 14,
        "slug": "docker-for-web-developers",
        "days_ago": 10,
    },
    {
        "title": "Building an API with NestJS and PostgreSQL",
        "excerpt": "A step-by-step guide to a RESTful API with NestJS and PostgreSQL.",
        "image": "https://images.unsplash.com/photo-1544383835-bda2bc66a55d?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80",
        "tags": ["NestJS", "PostgreSQL", "API"],
        "read_time": 18,
        "slug": "api-with-nestjs-postgresql",
        "days_ago": 14,
    },
]


def mock_posts(settings: Settings, now: datetime | None = None) -> List[Post]:
    """Demo posts dated relative to `now`, with images limited to allowed hosts."""
    now = now or datetime.now(timezone.utc)
    posts = []
    for i, raw in enumerate(_POSTS, start=1):
        image = raw["image"]
        posts.append(
            Post(
                id=i,
                title=raw["title"],
                excerpt=raw["excerpt"],
                content="Full article text...",
                date=now - timedelta(days=raw["days_ago"]),
                author=AUTHOR,
                image=image if settings.is_allowed_image(image) else None,
                tags=raw["tags"],
                read_time=raw["read_time"],
                slug=raw["slug"],
            )
        )
    return posts


async def load_posts(settings: Settings) -> List[Post]:
    # no blog backend yet; latency is simulated
    await asyncio.sleep(settings.posts_delay)
    return mock_posts(settings)


def tag_options(posts: List[Post]) -> List[str]:
    return category_options(tag for p in posts for tag in p.tags)
