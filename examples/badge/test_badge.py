"""Tests for the badge example."""


class TestBadgeApp:
    """Verify the inline template compiles and builds."""

    def test_generated_function(self, example_app) -> None:
        assert "def createBadgeComponent(dom):" in example_app.document.source
        assert "dom.create_element('span', 'lh-badge lh-badge--new')" in (
            example_app.document.source
        )

    def test_built_markup(self, example_app) -> None:
        assert example_app.output == (
            '<span class="lh-badge lh-badge--new" title="Added in this release"> New </span>'
        )

    def test_library(self, example_app) -> None:
        assert example_app.library.names == ("badge",)
