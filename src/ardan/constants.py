from pathlib import Path

SITE_URL = "https://courses.ardanlabs.com"
COURSES_URL = f"{SITE_URL}/courses/take"
COOKIE_DOMAIN = "courses.ardanlabs.com"
COOKIE_NAME = "remember_user_token"

# selectors
CONTENT_SELECTOR = ".course-player__content-inner"
COMPLETE_BUTTON_SELECTOR = '[data-qa="complete-continue__btn"]'
EMBED_FRAME_SELECTOR = "iframe"
SCRIPT_SELECTOR = "script"

EMBED_HOST = "fast.wistia.com"

# timeouts and pacing, in seconds
NAVIGATION_TIMEOUT = 30
STABLE_TIMEOUT = 5
SETTLE_WINDOW = 0.5
PACE_DELAY = 2

JSONS_DIR = Path("jsons")

USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64; rv:128.0) Gecko/20100101 Firefox/128.0"
)
