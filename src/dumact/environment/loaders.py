"""Source loaders for the dumact environment.

Loaders hand HTML source documents to the Environment. They implement
``get_source(name)`` returning ``(source, filename)``.

Built-in Loaders:
- ``FileSystemLoader``: Load from filesystem directories
- ``DictLoader``: Load from an in-memory dictionary (tests, embedded sources)
- ``FunctionLoader``: Wrap a callable as a loader

Custom Loaders:
Implement the same two methods:
    ```python
    class BundleLoader:
        def get_source(self, name: str) -> tuple[str, str | None]:
            data = bundle.read(name)
            if data is None:
                raise SourceNotFoundError(f"Source '{name}' not found in bundle")
            return data.decode("utf-8"), f"bundle://{name}"

        def list_sources(self) -> list[str]:
            return bundle.names()
    ```

"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from dumact.exceptions import SourceNotFoundError, did_you_mean


class FileSystemLoader:
    """Load source documents from one or more directories.

    Directories are searched in order; the first match wins.

    Example:
            >>> loader = FileSystemLoader("report/assets/")
            >>> source, filename = loader.get_source("templates.html")
            >>> filename
            'report/assets/templates.html'

    Raises:
        SourceNotFoundError: If the document is in none of the directories
    """

    __slots__ = ("_encoding", "_paths")

    def __init__(
        self,
        paths: str | Path | list[str | Path],
        encoding: str = "utf-8",
    ):
        if isinstance(paths, (str, Path)):
            paths = [paths]
        self._paths = [Path(p) for p in paths]
        self._encoding = encoding

    def get_source(self, name: str) -> tuple[str, str]:
        for base in self._paths:
            path = base / name
            if path.is_file():
                return path.read_text(self._encoding), str(path)

        message = f"Source '{name}' not found in: {', '.join(str(p) for p in self._paths)}"
        close = did_you_mean(name, self.list_sources())
        raise SourceNotFoundError(
            message,
            suggestion=f"Did you mean '{close}'?" if close else None,
        )

    def list_sources(self) -> list[str]:
        """All HTML documents under the search paths."""
        sources = set()
        for base in self._paths:
            if base.is_dir():
                for pattern in ("*.html", "*.htm"):
                    for path in base.rglob(pattern):
                        sources.add(path.relative_to(base).as_posix())
        return sorted(sources)


class DictLoader:
    """Load source documents from an in-memory mapping of name → HTML.

    Returns ``None`` as filename since sources are not file-backed.

    Example:
            >>> loader = DictLoader({
            ...     "templates.html": '<template id="badge"><span>New</span></template>',
            ... })
            >>> env = Environment(loader=loader)
            >>> env.get_document("templates.html").names
            ('badge',)
    """

    __slots__ = ("_mapping",)

    def __init__(self, mapping: dict[str, str]):
        self._mapping = mapping

    def get_source(self, name: str) -> tuple[str, None]:
        if name not in self._mapping:
            available = sorted(self._mapping)
            message = f"Source '{name}' not found"
            close = did_you_mean(name, available)
            if close:
                message += f". Did you mean '{close}'?"
            elif available:
                message += f". Available: {', '.join(available[:10])}"
                if len(available) > 10:
                    message += f" ... ({len(available)} total)"
            raise SourceNotFoundError(message)
        return self._mapping[name], None

    def list_sources(self) -> list[str]:
        return sorted(self._mapping)


class FunctionLoader:
    """Wrap a callable as a loader.

    The callable takes a source name and returns the HTML as ``str``, a
    ``(source, filename)`` tuple, or ``None`` when it has nothing by that
    name.

    Example:
            >>> def load(name):
            ...     if name == "inline":
            ...         return '<template id="badge"><span>New</span></template>'
            ...     return None
            >>> env = Environment(loader=FunctionLoader(load))
    """

    __slots__ = ("_load_func",)

    def __init__(self, load_func: Callable[[str], str | tuple[str, str | None] | None]):
        self._load_func = load_func

    def get_source(self, name: str) -> tuple[str, str | None]:
        result = self._load_func(name)
        if result is None:
            raise SourceNotFoundError(f"Source '{name}' not found")
        if isinstance(result, str):
            return result, "<function>"
        return result

    def list_sources(self) -> list[str]:
        """A FunctionLoader cannot enumerate its sources."""
        return []


Loader = FileSystemLoader | DictLoader | FunctionLoader
