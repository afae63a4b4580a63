# tests/test_cli.py
import json

import respx
from httpx import Response

from arxivsearch.cli import app

ARXIV_URL = "http://export.arxiv.org/api/query"


def run_cli(*args: str) -> int:
    try:
        app(list(args))
    except SystemExit as e:
        return e.code or 0
    return 0


class TestCliQuery:
    def test_prints_query_string(self, capsys):
        code = run_cli("query", "--author", "bousso", "--title", "arrow of time")

        assert code == 0
        assert capsys.readouterr().out.strip() == "au:bousso+AND+ti:arrow+AND+of+AND+time"

    def test_repeated_options(self, capsys):
        code = run_cli("query", "-c", "stat.AP", "-c", "stat.CO")

        assert code == 0
        assert capsys.readouterr().out.strip() == "cat:stat.AP+AND+cat:stat.CO"

    def test_unknown_category_is_reported(self, capsys):
        code = run_cli("query", "--category", "bogus", "--author", "wong")

        captured = capsys.readouterr()
        assert code == 0
        assert captured.out.strip() == "au:wong"
        assert "Unknown category ignored: bogus" in captured.err


class TestCliSearch:
    @respx.mock
    def test_search_json_output(self, capsys, sample_feed):
        route = respx.get(ARXIV_URL).mock(return_value=Response(200, text=sample_feed))

        code = run_cli("search", "--author", "bousso", "--format", "json", "--max", "2")

        captured = capsys.readouterr()
        assert code == 0
        assert route.called
        data = json.loads(captured.out)
        assert data["query"] == "au:bousso"
        assert data["total"] == 2
        assert "Total: 2 of 142 papers" in captured.err

    @respx.mock
    def test_search_tree_output(self, capsys, sample_feed):
        respx.get(ARXIV_URL).mock(return_value=Response(200, text=sample_feed))

        code = run_cli("search", "--title", "arrow of time")

        assert code == 0
        assert "└── URL: http://arxiv.org/abs/1112.3341v2" in capsys.readouterr().out

    @respx.mock
    def test_search_to_file(self, capsys, sample_feed, tmp_path):
        respx.get(ARXIV_URL).mock(return_value=Response(200, text=sample_feed))
        path = tmp_path / "papers.json"

        code = run_cli("search", "-a", "bousso", "-f", "json", "-o", str(path))

        assert code == 0
        assert json.loads(path.read_text())["total"] == 2
        assert f"Exported 2 papers to {path}" in capsys.readouterr().out

    def test_search_without_filters_fails(self, capsys):
        code = run_cli("search")

        assert code == 1
        assert "No filters given" in capsys.readouterr().err

    def test_search_with_only_unknown_category_fails(self, capsys):
        code = run_cli("search", "--category", "bogus")

        assert code == 1
        assert "No filters given" in capsys.readouterr().err

    def test_search_unknown_format_fails(self, capsys):
        code = run_cli("search", "--author", "bousso", "--format", "csv")

        assert code == 1
        assert "Unknown format" in capsys.readouterr().err

    @respx.mock
    def test_search_http_error(self, capsys):
        respx.get(ARXIV_URL).mock(return_value=Response(503))

        code = run_cli("search", "--author", "bousso")

        assert code == 1
        assert "Error:" in capsys.readouterr().err
