import logging
import threading
import webbrowser

import uvicorn

from portfolio.config import load_settings

APP = "portfolio.main:app"
RELOAD_DIRS = ["portfolio", "frontend"]
RELOAD_INCLUDES = ["*.py", "*.js", "*.html", "*.json"]
BROWSER_DELAY = 1.0


def open_browser_once(url: str):
    print(f"[server] Opening {url}")
    try:
        webbrowser.open(url)
    except webbrowser.Error as exc:
        print(f"[server] Could not open browser: {exc}")


def main():
    """
    Dev entry point: serve the site with uvicorn's reloader watching the
    package and the frontend, and open the page once the server is up.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings()
    url = f"http://{settings.host}:{settings.port}/"

    # the reloader re-imports the app in a child process; only the parent opens the browser
    threading.Timer(BROWSER_DELAY, open_browser_once, args=(url,)).start()

    uvicorn.run(
        APP,
        host=settings.host,
        port=settings.port,
        log_level="info",
        reload=True,
        reload_dirs=RELOAD_DIRS,
        reload_includes=RELOAD_INCLUDES,
    )


if __name__ == "__main__":
    main()
