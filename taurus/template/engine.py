"""Named template collections backed by Jinja2, preloaded with the helper functions."""

from __future__ import annotations

import glob
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

import jinja2

from taurus.template.funcs import FUNCS

T = TypeVar("T")


class TemplatePathFormat(Protocol):
    def dir(self) -> str: ...


class Template:
    """A set of named templates sharing one function table."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.funcs: dict[str, Callable[..., Any]] = {}
        self._sources: dict[str, str] = {}
        self._env = jinja2.Environment(
            loader=jinja2.DictLoader(self._sources),
            keep_trailing_newline=True,
            autoescape=False,
        )

    def add_funcs(self, funcs: Mapping[str, Callable[..., Any]]) -> Template:
        """Make ``funcs`` callable from templates; the first registration of a name is recorded."""
        self._env.globals.update(funcs)
        for name, func in funcs.items():
            self.funcs.setdefault(name, func)
        return self

    def add_source(self, name: str, source: str) -> Template:
        """Add a template under ``name``; raises jinja2.TemplateSyntaxError if it does not parse."""
        self._env.parse(source, name=name)
        self._sources[name] = source
        return self

    def parse_files(self, *args: str | os.PathLike[str]) -> Template:
        """Add each file as a template named by its base name."""
        for filename in args:
            with open(filename, encoding="utf-8") as handle:
                source = handle.read()
            self.add_source(os.path.basename(os.fspath(filename)), source)
        return self

    def parse_dir(self, path: str | os.PathLike[str]) -> Template:
        """Add every file below ``path``, except ``.go`` files, in lexical order."""
        if not os.path.exists(path):
            raise FileNotFoundError(f"walk path {os.fspath(path)}: no such file or directory")
        for root, dirs, files in os.walk(path):
            dirs.sort()
            for filename in sorted(files):
                if filename.endswith(".go"):
                    continue
                self.parse_files(os.path.join(root, filename))
        return self

    def parse_glob(self, pattern: str) -> Template:
        """Add every file matching ``pattern``; raises ValueError if nothing matches."""
        matches = sorted(glob.glob(pattern))
        if not matches:
            raise ValueError(f"pattern matches no files: {pattern!r}")
        return self.parse_files(*matches)

    def execute_template(self, name: str, data: Any = None) -> str:
        """Render the template ``name``; mapping keys become variables, ``data`` holds the whole value."""
        context: dict[str, Any] = {"data": data}
        if isinstance(data, Mapping):
            context.update(data)
        return self._env.get_template(name).render(context)


def new_template(name: str) -> Template:
    """Create a template set with the standard helper functions."""
    return Template(name).add_funcs(FUNCS)


@dataclass
class FileTemplate(Generic[T]):
    """A template to render into a file whose path comes from ``format``."""

    name: str
    format: Callable[[TemplatePathFormat], str]
    skip: Callable[[T], bool] | None = None


def dir_format(pattern: str) -> Callable[[TemplatePathFormat], str]:
    """Return a formatter that puts the target's directory into ``pattern`` at ``%s``."""

    def _format(target: TemplatePathFormat) -> str:
        return pattern % target.dir()

    return _format