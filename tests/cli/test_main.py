# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the compdoc CLI entry point."""

import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from compdoc.cli.main import main

# ###############
# Helpers
# ###############

_CALLER = """\
id: caller
package: com.example.caller
interface:
  api:
    call:
      foo: {}
"""

_PROVIDER = """\
id: provider
package: com.example.provider
interface:
  api:
    register:
      foo: {}
"""


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def _project(tmp_path: Path) -> Path:
    """Create a project with two matching components."""
    _write(tmp_path / "caller" / "component.yaml", _CALLER)
    _write(tmp_path / "provider" / "component.yaml", _PROVIDER)
    return tmp_path


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    monkeypatch.setattr(sys, "argv", ["compdoc", *argv])
    with pytest.raises(SystemExit) as exc_info:
        main()
    code = exc_info.value.code
    return code if isinstance(code, int) else 0


# ###############
# Public Interface
# ###############


def test_main_no_args_prints_help_and_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    """main() with no subcommand prints help and exits with code 0."""
    assert _run(monkeypatch) == 0


# -------- init tests --------


def test_init_creates_project_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "init", str(tmp_path)) == 0
    content = (tmp_path / ".compdoc.yaml").read_text(encoding="utf-8")
    assert "output-folder: build/doc" in content
    assert "component.yaml" in content


def test_init_fails_if_project_exists(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".compdoc.yaml").write_text("output-name: x\n", encoding="utf-8")
    assert _run(monkeypatch, "init", str(tmp_path)) == 1


def test_init_fails_if_directory_does_not_exist(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "init", str(tmp_path / "nonexistent")) == 1


# -------- check tests --------


def test_check_without_descriptors(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(monkeypatch, "check", str(tmp_path)) == 0
    assert "No component descriptors found." in capsys.readouterr().out


def test_check_matching_components(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(monkeypatch, "check", str(_project(tmp_path))) == 0
    out = capsys.readouterr().out
    assert "Checking 2 component descriptor(s)..." in out
    assert "No issues found." in out


def test_check_reports_unmatched_declarations(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _write(tmp_path / "caller" / "component.yaml", _CALLER)
    assert _run(monkeypatch, "check", str(tmp_path)) == 0
    out = capsys.readouterr().out
    assert "Warning: 'caller.api.call.foo' has no counterpart in 'api.register'." in out
    assert "No issues found." not in out


def test_check_fails_on_duplicate_id(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _project(tmp_path)
    _write(tmp_path / "zzz" / "component.yaml", _CALLER)
    assert _run(monkeypatch, "check", str(tmp_path)) == 1
    err = capsys.readouterr().err
    assert "DUPLICATE ID caller" in err
    assert "hint:" in err


def test_check_verbose_lists_registrations(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(monkeypatch, "check", str(_project(tmp_path)), "--verbose") == 0
    assert "REGISTERED: provider" in capsys.readouterr().out


def test_check_fails_on_invalid_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write(tmp_path / "broken" / "component.yaml", "id: [unclosed\n")
    assert _run(monkeypatch, "check", str(tmp_path)) == 1


def test_check_fails_on_invalid_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _project(tmp_path)
    (tmp_path / ".compdoc.yaml").write_text("build-pdf: maybe\n", encoding="utf-8")
    assert _run(monkeypatch, "check", str(tmp_path)) == 1


def test_check_uses_configured_sources(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _project(tmp_path)
    _write(tmp_path / "other" / "descriptor.yaml", _CALLER.replace("id: caller", "id: other"))
    (tmp_path / ".compdoc.yaml").write_text('sources:\n  - "**/descriptor.yaml"\n', encoding="utf-8")
    assert _run(monkeypatch, "check", str(tmp_path)) == 0
    assert "Checking 1 component descriptor(s)..." in capsys.readouterr().out



def test_check_rejects_absolute_source_pattern(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _project(tmp_path)
    (tmp_path / ".compdoc.yaml").write_text(f'sources:\n  - "{tmp_path}/**/component.yaml"\n', encoding="utf-8")
    assert _run(monkeypatch, "check", str(tmp_path)) == 1
    assert "must be relative" in capsys.readouterr().err

# -------- generate tests --------


def test_generate_writes_default_document(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "generate", str(_project(tmp_path))) == 0
    html = (tmp_path / "build" / "doc" / "components.html").read_text(encoding="utf-8")
    assert 'href="#provider.api.register.foo"' in html


def test_generate_with_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _project(tmp_path)
    assert _run(monkeypatch, "generate", str(tmp_path), "--output", "site", "--name", "api") == 0
    assert (tmp_path / "site" / "api.html").exists()


def test_generate_with_custom_template(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _project(tmp_path)
    _write(tmp_path / "tpl" / "doc.html.j2", "{% for c in components %}{{ c.id }};{% endfor %}")
    assert _run(monkeypatch, "generate", str(tmp_path), "--template", "tpl/doc.html.j2") == 0
    assert (tmp_path / "build" / "doc" / "components.html").read_text(encoding="utf-8") == "caller;provider;"


def test_generate_ignores_descriptors_in_output_folder(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _project(tmp_path)
    _write(tmp_path / "build" / "doc" / "copy" / "component.yaml", _CALLER)
    assert _run(monkeypatch, "generate", str(tmp_path)) == 0
    out = capsys.readouterr()
    assert "Loaded 2 component(s)" in out.out
    assert "DUPLICATE ID" not in out.err


def test_generate_with_pdf(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _project(tmp_path)
    completed = MagicMock(returncode=0, stdout="", stderr="")
    with patch("subprocess.run", return_value=completed) as mock_run:
        assert _run(monkeypatch, "generate", str(tmp_path), "--pdf") == 0
    assert mock_run.call_args[0][0][0] == "prince"


def test_generate_fails_on_missing_template(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _project(tmp_path)
    assert _run(monkeypatch, "generate", str(tmp_path), "--template", "nope.html.j2") == 1


# -------- serve tests --------


def test_serve_runs_app(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _project(tmp_path)
    mock_app = MagicMock()
    with patch("compdoc.webui.app.create_app", return_value=mock_app) as mock_create:
        assert _run(monkeypatch, "serve", str(tmp_path), "--port", "9000") == 0
    payload = mock_create.call_args[0][0]
    assert [c["id"] for c in payload] == ["caller", "provider"]
    mock_app.run.assert_called_once_with(host="127.0.0.1", port=9000, debug=False)


def test_serve_fails_if_directory_does_not_exist(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "serve", str(tmp_path / "missing")) == 1
