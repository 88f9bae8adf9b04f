"""CLI behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cssmodules.cli import _build_parser, main

GRAPH = {
    "app.css": {
        "id": "./app.css",
        "dependencies": [{"request": "./other.css", "module": "other.css"}],
    },
    "other.css": {"id": "./other.css"},
}


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "normalize-url", "a.png"])
    assert args.verbose is True
    assert args.command == "normalize-url"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["ident", "a.css", "btn", "--verbose"])
    assert args.verbose is True
    assert args.command == "ident"
    assert args.locals == ["btn"]


def test_cli_accepts_convention_override() -> None:
    parser = _build_parser()
    args = parser.parse_args(["exports", "in.json", "--convention", "dashesOnly"])
    assert args.input == "in.json"
    assert args.convention == "dashesOnly"


def test_normalize_url_prints_each_value(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["--config", str(tmp_path), "normalize-url", "foo%20bar", "\\48\\65\\6c\\6c\\6f"])
    assert capsys.readouterr().out == "foo bar\nHello\n"


def test_ident_uses_config_template(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / ".cssmodules.yml").write_text(
        "modules:\n  local_ident_name: '[name]_[local]'\n", encoding="utf-8"
    )
    main(["--config", str(tmp_path), "ident", "src/card.css", "title", "body"])
    assert capsys.readouterr().out == "card_title\ncard_body\n"


def test_invalid_config_exits_with_error(tmp_path: Path) -> None:
    (tmp_path / ".cssmodules.yml").write_text("output:\n  hash_digest: nope\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "normalize-url", "a"])
    assert excinfo.value.code == 1


def test_exports_renders_module_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "exports.json"
    source.write_text(
        json.dumps(
            {
                "module": "app.css",
                "exports": {"fooBar": ["x", {"import": "b", "from": "./other.css"}]},
                "graph": GRAPH,
            }
        ),
        encoding="utf-8",
    )
    main(["--config", str(tmp_path), "exports", str(source), "--convention", "dashes"])
    assert capsys.readouterr().out == (
        "module.exports = {\n"
        '  "fooBar": "x" + " " + __webpack_require__("./other.css")["b"],\n'
        '  "foo-bar": "x" + " " + __webpack_require__("./other.css")["b"],\n'
        "};\n"
    )


def test_exports_missing_dependency_exits(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "exports.json"
    source.write_text(
        json.dumps(
            {
                "module": "app.css",
                "exports": {"a": [{"import": "b", "from": "./gone.css"}]},
                "graph": GRAPH,
            }
        ),
        encoding="utf-8",
    )
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "exports", str(source)])
    assert excinfo.value.code == 1
    assert "./gone.css" in capsys.readouterr().err


def test_exports_batch_reports_failed_modules_only(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = tmp_path / "exports.json"
    source.write_text(
        json.dumps(
            {
                "modules": {
                    "app.css": {"a": [{"import": "b", "from": "./gone.css"}]},
                    "other.css": {"b": ["other_b"]},
                },
                "graph": GRAPH,
            }
        ),
        encoding="utf-8",
    )
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "exports", str(source)])
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == '// other.css\nmodule.exports = {\n  "b": "other_b",\n};\n'
    assert "app.css" in captured.err


def test_exports_rejects_malformed_input(tmp_path: Path) -> None:
    source = tmp_path / "exports.json"
    source.write_text("not json", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "exports", str(source)])
    assert excinfo.value.code == 1


def test_cli_accepts_log_file_option(tmp_path: Path) -> None:
    parser = _build_parser()
    args = parser.parse_args(["--log-file", str(tmp_path / "run.log"), "normalize-url", "a"])
    assert args.log_file == tmp_path / "run.log"


def test_log_file_receives_records(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    log_file = tmp_path / "logs" / "run.log"
    main(
        [
            "--verbose",
            "--config",
            str(tmp_path),
            "--log-file",
            str(log_file),
            "ident",
            "src/card.css",
            "title",
        ]
    )
    capsys.readouterr()
    contents = log_file.read_text(encoding="utf-8")
    assert "cssmodules.cli: Using configuration rooted at" in contents
    assert "cssmodules.ident: Renamed .title in src/card.css" in contents
