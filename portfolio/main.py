from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .blog import load_posts, tag_options
from .config import load_settings
from .contact import ContactForm
from .filters import ALL, filter_by_category
from .github import profile_url
from .models import ContactIn, Fallback, PostFilter, RepoFilter, SpyRequest
from .navigation import LOOKAHEAD, NAV_ITEMS, active_section, is_scrolled
from .profile import profile
from .projects import fetch_projects, language_options, repo_card
from .storage import LocalStore

FRONTEND_DIR = Path(__file__).resolve().parent.parent / "frontend"

app = FastAPI(title="Portfolio")

# Serve static assets (JS, CSS)
app.mount("/static", StaticFiles(directory=FRONTEND_DIR), name="static")

settings = load_settings()
store = LocalStore(settings.store_path)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def serve_index():
    return FileResponse(FRONTEND_DIR / "index.html")


@app.get("/api/config")
def get_config():
    return settings


@app.get("/api/profile")
def get_profile():
    return profile()


@app.get("/api/nav")
def get_nav():
    return {"items": NAV_ITEMS, "lookahead": LOOKAHEAD}


@app.post("/api/nav/spy")
def scroll_spy(payload: SpyRequest):
    return {
        "active": active_section(payload.scroll_y, payload.sections, current=payload.current),
        "scrolled": is_scrolled(payload.scroll_y),
        "seq": payload.seq,
    }


@app.get("/api/projects")
def get_projects():
    """Full project list; the page calls this once per load."""
    result = fetch_projects(store, settings)
    demo = isinstance(result, Fallback)
    return {
        "items": [repo_card(r) for r in result.items],
        "languages": language_options(result.items),
        "selected": ALL,
        "demo": demo,
        "warning": result.warning if demo else None,
        "from_cache": getattr(result, "from_cache", False),
        "profile_url": profile_url(settings.github_username),
    }


@app.post("/api/projects/filter")
def filter_projects(payload: RepoFilter):
    # filters the list the page already holds; never touches GitHub
    if not payload.language.strip():
        raise HTTPException(400, "Language required")
    items = filter_by_category(payload.items, payload.language, lambda r: r.language)
    return {"items": [repo_card(r) for r in items], "selected": payload.language}


@app.get("/api/posts")
async def get_posts():
    posts = await load_posts(settings)
    return {"items": posts, "tags": tag_options(posts), "selected": ALL}


@app.post("/api/posts/filter")
def filter_posts(payload: PostFilter):
    if not payload.tag.strip():
        raise HTTPException(400, "Tag required")
    items = filter_by_category(payload.items, payload.tag, lambda p: p.tags)
    return {"items": items, "selected": payload.tag}


@app.post("/api/contact")
async def submit_contact(payload: ContactIn):
    form = ContactForm(payload)
    if not await form.submit(settings.submit_delay):
        return JSONResponse(status_code=422, content={"ok": False, "errors": form.errors})
    return {"ok": True, "reset_after": settings.reset_delay}
