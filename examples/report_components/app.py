"""File-based components -- the build-time pattern.

Loads a document of report templates with FileSystemLoader, compiles it to
a Python module and builds every component, checking each one against its
source template.

Run:
    python app.py
"""

from pathlib import Path

from dumact import (
    DOM,
    Environment,
    FileSystemLoader,
    UnknownComponentError,
    assert_equivalent,
    discover_templates,
    parse_document,
)

templates_dir = Path(__file__).parent / "templates"
env = Environment(loader=FileSystemLoader(templates_dir))

document = env.get_document("report.html")
library = env.load_components("report.html")
dom = DOM(components=library)

fragments = {name: dom.create_component(name) for name in library}

source_templates = discover_templates(
    parse_document((templates_dir / "report.html").read_text(encoding="utf-8"))
)
for template in source_templates:
    assert_equivalent(template, fragments[template.name])

try:
    dom.create_component("guage")
except UnknownComponentError as exc:
    unknown_error = exc


def main() -> None:
    for unit in document.units:
        print(f"{unit.name:>18} -> {unit.function_name}() ({len(unit.statements)} statements)")
    print()
    print(fragments["gauge"].firstChild.toprettyxml(indent="  "))
    print(unknown_error.format_compact())


if __name__ == "__main__":
    main()
