"""Jinja2 rendering of check reports."""

from __future__ import annotations

import os

from jinja2 import Environment, FileSystemLoader


def _get_template_directories() -> list[str]:
    """Template search paths: the ``template`` directory bundled in-package."""

    # Base dir is .../variant_schema/file_io
    base_dir = os.path.dirname(os.path.abspath(__file__))
    report_template_dir = os.path.abspath(os.path.join(base_dir, "../template"))

    if os.path.isdir(report_template_dir):
        return [report_template_dir]
    return []


def pointer_filter(value):
    """Render an empty instance path as the document root."""

    return value if value else "/"


class TemplateRenderer:
    """Renders report templates; extra directories take precedence over the bundled ones."""

    def __init__(self, template_dir: str | list[str] | None = None):
        extra_dirs: list[str] = []
        if isinstance(template_dir, str):
            extra_dirs = [template_dir]
        elif template_dir is not None:
            extra_dirs = list(template_dir)

        self.template_dirs = extra_dirs + _get_template_directories()
        self.env = Environment(
            loader=FileSystemLoader(self.template_dirs),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            newline_sequence="\n",
            autoescape=False,
        )
        self.env.filters["pointer"] = pointer_filter

    def render_template(self, template_name: str, **kwargs) -> str:
        return self.env.get_template(template_name).render(**kwargs)

    def render_template_to_file(self, template_name: str, output_path: str, **kwargs) -> None:
        output_dir = os.path.dirname(output_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(self.render_template(template_name, **kwargs))
