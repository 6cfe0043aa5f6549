"""Pytest configuration and fixtures for dumact tests."""

import pytest

from dumact import DOM, ComponentLibrary, DictLoader, Environment, discover_templates, parse_document

REPORT_TEMPLATES = """\
<!doctype html>
<!-- Components of the report, compiled ahead of time. -->
<template id="crc">
  <div class="lh-crc-container">
    <style>
      .lh-crc .lh-tree-marker {
        width: 12px;
      }
    </style>
    <div class="lh-crc">
      <div class="lh-crc-initial-nav">Initial Navigation</div>
      <!-- stats are filled in at runtime -->
      <span class="lh-crc__longest_duration_label"></span> <b class="lh-crc__longest_duration"></b>
    </div>
  </div>
</template>

<template id="audit">
  <div class="lh-audit">
    <details class="lh-expandable-details">
      <summary>
        <div class="lh-audit__header lh-expandable-details__summary">
          <span class="lh-audit__score-icon"></span>
          <span class="lh-audit__title-and-text">
            <span class="lh-audit__title"></span>
            <span class="lh-audit__display-text"></span>
          </span>
        </div>
      </summary>
      <div class="lh-audit__description"></div>
      <div class="lh-audit__stackpacks"></div>
    </details>
  </div>
</template>

<template id="chevron">
  <svg class="lh-chevron" title="See audits" xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
    <g class="lh-chevron__lines">
      <path class="lh-chevron__line lh-chevron__line-left" d="M10 50h40"></path>
      <path class="lh-chevron__line lh-chevron__line-right" d="M90 50H50"></path>
    </g>
  </svg>
</template>

<template id="snippet">
  <div class="lh-snippet" data-tooltip="Source   snippet">
    <pre class="lh-snippet__line">  function  main() {
    return   1;
  }</pre>
    <table class="lh-table lh-snippet__table">
      <tbody>
        <tr><td class="lh-snippet__line-number">1</td></tr>
      </tbody>
    </table>
  </div>
  <div class="lh-snippet__footer">Lines   omitted</div>
</template>
"""


@pytest.fixture
def report_source():
    """HTML source of the report templates."""
    return REPORT_TEMPLATES


@pytest.fixture
def report_templates():
    """The report templates, discovered but not compiled."""
    return {
        template.name: template
        for template in discover_templates(parse_document(REPORT_TEMPLATES))
    }


@pytest.fixture
def env():
    """Create a basic dumact Environment."""
    return Environment()


@pytest.fixture
def env_strict():
    """Create an Environment that also drops interior whitespace-only text."""
    return Environment(strip_interior_whitespace=True)


@pytest.fixture
def env_with_loader():
    """Create an Environment with a DictLoader holding the report templates."""
    return Environment(loader=DictLoader({"templates.html": REPORT_TEMPLATES}))


@pytest.fixture
def report_document(env):
    """The report templates, compiled."""
    return env.from_string(REPORT_TEMPLATES, name="templates.html")


@pytest.fixture
def report_library(report_document):
    """The report templates, executed in-process."""
    return ComponentLibrary(report_document)


@pytest.fixture
def dom(report_library):
    """A minidom-backed builder wired to the report components."""
    return DOM(components=report_library)
