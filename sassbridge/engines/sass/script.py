"""
Ruby Sass script builder rendered with Jinja2.

The script loads the requires in order, builds a Sass::Engine over the encoded
SCSS source, appends each load path to the engine's importers, then assigns
the rendered CSS to `result`.
"""

from collections.abc import Iterable

from jinja2 import Environment, Template

from .filters import SASS_FILTERS

RESULT_VARIABLE = "result"

_SCRIPT_SOURCE = """\
{% for require in requires %}
  require '{{ require | ruby_quoted }}'
{% endfor %}
engine = Sass::Engine.new("{{ content | sass_content }}", {:syntax => {{ syntax }}})
engine.options[:load_paths].tap do |load_paths|
{% for path in load_paths %}
  load_paths << Sass::Importers::Filesystem.new('{{ path | ruby_single_quoted }}')
{% endfor %}
end
{{ result_variable }} = engine.render
"""

# Expanded (brace) dialect, not the indented one
_SYNTAX = ":scss"

_SCRIPT_TEMPLATE: Template | None = None


def _get_script_template() -> Template:
    """Return the shared compiled script template."""
    global _SCRIPT_TEMPLATE
    if _SCRIPT_TEMPLATE is None:
        env = Environment(
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        env.filters.update(SASS_FILTERS)
        _SCRIPT_TEMPLATE = env.from_string(_SCRIPT_SOURCE)
    return _SCRIPT_TEMPLATE


def build_update_script(
    content: str,
    requires: Iterable[str],
    load_paths: Iterable[str],
) -> str:
    """Render the Ruby program compiling *content*; a pure function of its arguments."""
    if content is None:
        raise ValueError("content must not be None")
    return _get_script_template().render(
        requires=list(requires),
        load_paths=list(load_paths),
        content=content,
        syntax=_SYNTAX,
        result_variable=RESULT_VARIABLE,
    )
