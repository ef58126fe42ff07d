"""Body renderers and the static format-to-renderer table"""

from functools import partial
from types import MappingProxyType
from typing import Any, Callable, Mapping

from jinja2 import Environment
from markdown_it import MarkdownIt
from pypugjs.ext.jinja import Compiler as PugJinjaCompiler
from pypugjs.utils import process as pug_to_jinja

from mdblog.core.models import ContentFormat


Renderer = Callable[..., str]

# Globals registered by the extension are needed by the compiled pug output.
_PUG_ENV = Environment(autoescape=True, extensions=["pypugjs.ext.jinja.PyPugJSExtension"])


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def render_markdown(body: str, preset: str = "gfm-like") -> str:
    """Render markdown body text to HTML."""
    return _make_parser(preset).render(body)


def render_pug(body: str, **context: Any) -> str:
    """Compile pug/jade source to a Jinja2 template and render it with context."""
    source = pug_to_jinja(body, compiler=PugJinjaCompiler)
    return _PUG_ENV.from_string(source).render(**context)


RENDERERS: Mapping[ContentFormat, Renderer] = MappingProxyType({
    ContentFormat.md:       render_markdown,
    ContentFormat.markdown: render_markdown,
    ContentFormat.pug:      render_pug,
    ContentFormat.jade:     render_pug,
})


def build_renderers(markdown_preset: str = "gfm-like") -> Mapping[ContentFormat, Renderer]:
    """Return the renderer table with markdown bound to markdown_preset."""
    markdown = partial(render_markdown, preset=markdown_preset)
    return MappingProxyType({
        **RENDERERS,
        ContentFormat.md:       markdown,
        ContentFormat.markdown: markdown,
    })
