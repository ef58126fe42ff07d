"""Flask boundary: map HTTP requests onto BlogService reads"""

import logging
from pathlib import Path
from typing import Any, Optional

from flask import Flask, abort, jsonify, request
from jinja2 import Environment

from mdblog.core.render import render_pug
from mdblog.errors import BlogError
from mdblog.service import BlogService
from mdblog.util.fs import file_extension


logger = logging.getLogger(__name__)

PUG_TEMPLATE_EXTENSIONS = {"pug", "jade"}

_JINJA = Environment(autoescape=True)


def render_template_file(path: str | Path, **context: Any) -> str:
    """Render a template file; pug/jade through the pug renderer, anything else as Jinja2."""
    path = Path(path)
    source = path.read_text(encoding="utf-8")
    if file_extension(path.name) in PUG_TEMPLATE_EXTENSIONS:
        return render_pug(source, **context)
    return _JINJA.from_string(source).render(**context)


def create_app(
    service: BlogService,
    page_template: Optional[str | Path] = None,
    post_template: Optional[str | Path] = None,
    ) -> Flask:
    """Build a Flask app serving the listing at '/' and single items at '/<identifier>'.

    Without templates, pages and items are returned as JSON.
    """
    app = Flask(__name__)

    @app.errorhandler(BlogError)
    def handle_blog_error(e: BlogError):
        logger.error("%s: %s", type(e).__name__, e)
        return jsonify(error=type(e).__name__, message=str(e)), 500

    @app.get("/")
    def index():
        # Page is 1-indexed in the query string, e.g. /?page=2
        page = service.get_page(request.args.get("page", 1, type=int))
        if page_template:
            return render_template_file(page_template, page=page, posts=page.items)
        return jsonify(page.model_dump(mode="json"))

    @app.get("/<identifier>")
    def view_post(identifier: str):
        post = service.get_item(identifier)
        if post is None:
            abort(404)
        if post_template:
            return render_template_file(post_template, post=post)
        return jsonify(post.model_dump(mode="json"))

    return app
