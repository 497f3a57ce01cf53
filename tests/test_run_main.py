"""Tests for run.py main() with an injected container."""
from datetime import datetime
from unittest.mock import Mock, patch

from run import main
from wikicontext.container import Container
from wikicontext.domain import ContextDocument
from wikicontext.exceptions import NoValidResourcesError

SEED = "https://wiki.example.com/wiki/spaces/TEAM/pages/1/Home"


def _document():
    return ContextDocument(
        text="=== CORPORATE DOCUMENTATION CONTEXT ===\n",
        generated_at=datetime(2026, 10, 17),
        resource_count=1,
        pages_processed=1,
        spaces_processed=1,
    )


def _container(controller):
    container = Container()
    container.crawl_controller.override(controller)
    return container


def test_collect_writes_context_file(tmp_path, capsys):
    controller = Mock(collect_context=Mock(return_value=_document()))

    code = main(["collect", SEED, "--output-dir", str(tmp_path)], container=_container(controller))

    assert code == 0
    controller.collect_context.assert_called_once_with([SEED])
    written = tmp_path / "wiki_context_2026-10-17.txt"
    assert written.read_text(encoding="utf-8") == _document().text
    assert "Total pages processed: 1" in capsys.readouterr().out


def test_collect_merges_seed_file_and_prints_prompt(tmp_path, capsys):
    seeds = tmp_path / "seeds.yml"
    seeds.write_text("seed_urls:\n  - https://wiki.example.com/wiki/spaces/OPS/pages/2\n", encoding="utf-8")
    controller = Mock(collect_context=Mock(return_value=_document()))

    main(
        ["collect", SEED, "--seeds-file", str(seeds), "--output-dir", str(tmp_path), "--question", "What is OPS?"],
        container=_container(controller),
    )

    controller.collect_context.assert_called_once_with([SEED, "https://wiki.example.com/wiki/spaces/OPS/pages/2"])
    assert "What is OPS?" in capsys.readouterr().out


def test_collect_without_seeds_returns_error_code(tmp_path):
    controller = Mock(collect_context=Mock(side_effect=NoValidResourcesError()))
    assert main(["collect", "--output-dir", str(tmp_path)], container=_container(controller)) == 2
    assert list(tmp_path.iterdir()) == []


def test_serve_starts_uvicorn():
    with patch('run.uvicorn.run') as mock_uvicorn:
        assert main(["serve", "--port", "9001"], container=Container()) == 0
    assert mock_uvicorn.called
    assert mock_uvicorn.call_args.kwargs["port"] == 9001
