"""Hello, components -- compile an inline template and build it.

Compiles one ``<template>`` from a string, prints the generated module and
builds the component in-process with the minidom builder.

Run:
    python app.py
"""

from dumact import DOM, ComponentLibrary, Environment

SOURCE = """
<template id="badge">
  <span class="lh-badge  lh-badge--new" title="Added in this release">
    New
  </span>
</template>
"""

env = Environment()
document = env.from_string(SOURCE, name="badge.html")
library = ComponentLibrary(document)

fragment = library.create(DOM(), "badge")
output = fragment.firstChild.toxml()


def main() -> None:
    print(document.source)
    print(output)


if __name__ == "__main__":
    main()
