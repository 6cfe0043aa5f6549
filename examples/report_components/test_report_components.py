"""Tests for the report-components example."""

from dumact import ErrorCode, terminal


class TestReportComponentsApp:
    """Verify loading, compiling and building file-based components."""

    def test_components_sorted(self, example_app) -> None:
        assert example_app.document.names == ("gauge", "metric", "warningsToplevel")

    def test_function_names(self, example_app) -> None:
        names = [unit.function_name for unit in example_app.document.units]
        assert names == [
            "createGaugeComponent",
            "createMetricComponent",
            "createWarningsToplevelComponent",
        ]

    def test_gauge_svg(self, example_app) -> None:
        gauge = example_app.fragments["gauge"].firstChild
        assert gauge.getAttribute("href") == "#"
        circles = gauge.getElementsByTagName("circle")
        assert [c.getAttribute("class") for c in circles] == ["lh-gauge-base", "lh-gauge-arc"]
        assert circles[0].namespaceURI == "http://www.w3.org/2000/svg"

    def test_warning_message(self, example_app) -> None:
        strong = example_app.fragments["warningsToplevel"].firstChild.getElementsByTagName(
            "strong"
        )[0]
        assert strong.firstChild.data == "There were issues affecting this run:"

    def test_unknown_component_suggestion(self, example_app) -> None:
        error = example_app.unknown_error
        assert error.code is ErrorCode.UNKNOWN_COMPONENT
        assert "Did you mean 'gauge'?" in terminal.strip_colors(error.message)
