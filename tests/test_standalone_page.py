from entity_columns.config import LayoutConfig

from entity_columns.standalone_page import generate_standalone_page


class TestGenerateStandalonePage:
    def test_title_is_escaped(self) -> None:
        html = generate_standalone_page(
            ["A"], LayoutConfig(name_callback=str), title="Spam & <Eggs>"
        )
        assert "<title>Spam &amp; &lt;Eggs&gt;</title>" in html
        assert "<h1>Spam &amp; &lt;Eggs&gt;</h1>" in html

    def test_tables_are_not_escaped(self) -> None:
        html = generate_standalone_page(
            ["A", "B", "C"], LayoutConfig(columns=2, name_callback=str)
        )
        assert html.startswith("<!DOCTYPE html>")
        assert html.count('<table width="100%">') == 2
        assert "<div>A</div>" in html

    def test_no_entities(self) -> None:
        html = generate_standalone_page([])
        assert "<title>Entities</title>" in html
        assert "<table" not in html
