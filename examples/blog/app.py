"""Blog — callable and script handlers, a route group, and URL building.

Script handlers live in ``pages/`` and define ``handle(*params)``.

Run:
    python app.py /blog/42/hello-router
"""

import sys
from pathlib import Path

from wren import HTTPError, Router

PAGES = Path(__file__).parent / "pages"

router = Router()


@router.get("/", name="home")
def home():
    return "Home"


router.get("/blog/:id/:slug", PAGES / "blog_detail.py", "blog_detail")
router.post("/blog/:id/comments", PAGES / "comment.py", "blog_comment")


def _admin(r):
    r.get("users/:id", PAGES / "admin_user.py", "admin_user_show")
    r.get("drafts/:slug", PAGES / "missing_draft.py", "admin_draft")


router.group("admin", _admin)


if __name__ == "__main__":
    print(router.build_url("blog_detail", {"id": 42, "slug": "hello-router"}))
    print(router.build_url("/blog/:id/:slug", {"id": 7, "slug": "first-draft"}))

    target = sys.argv[1] if len(sys.argv) > 1 else "/"
    try:
        print(router.dispatch(target, "GET"))
    except HTTPError as exc:
        print(exc, file=sys.stderr)
        sys.exit(1)
