# tests/core/test_convert_handler.py
from pathlib import Path

import pytest

from manifest_shell.core.context.studio_context import StudioContext
from manifest_shell.core.handlers.convert_handler import handle_convert
from manifest_shell.core.managers.config_manager import config_manager

PAGE = """<html><head><style>.x { color: blue; }</style></head>
<body>
  <header>Title</header>
  <main><input name="email" value="a@b.com"></main>
</body></html>"""


@pytest.fixture
def studio_context():
    return StudioContext()


@pytest.fixture
def page(tmp_path):
    """Een markup-bestand in een tijdelijke map."""
    path = tmp_path / "signup-page.html"
    path.write_text(PAGE, encoding="utf-8")
    return path


@pytest.fixture
def restore_config():
    yield config_manager
    config_manager.reset()


def test_convert_run_writes_component(page, studio_context, capsys):
    """Test dat 'convert run' een .tsx bestand naast de bron schrijft."""
    exit_code = handle_convert(["run", str(page)], studio_context)

    output = page.parent / "SignupPage.tsx"
    assert exit_code == 0
    assert output.exists()
    content = output.read_text(encoding="utf-8")
    assert "export default function SignupPage() {" in content
    assert ".x { color: blue; }" in content
    assert "✅ SignupPage: 2 units, 1 state fields" in capsys.readouterr().out

    # De conversie wordt in de sessie vastgelegd
    assert studio_context.last_result.component_name == "SignupPage"
    assert Path(studio_context.get("last.output")) == output.resolve()
    assert len(studio_context.history) == 1


def test_convert_run_with_name_and_out_dir(page, tmp_path, studio_context):
    out_dir = tmp_path / "build" / "components"
    exit_code = handle_convert(["run", str(page), "--name", "Signup Form", "--out", str(out_dir)], studio_context)

    assert exit_code == 0
    assert (out_dir / "SignupForm.tsx").exists()


def test_convert_run_stdout(page, studio_context, capsys):
    exit_code = handle_convert(["run", str(page), "--stdout"], studio_context)

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "export default function SignupPage() {" in captured.out
    assert not (page.parent / "SignupPage.tsx").exists()
    assert studio_context.get("last.output") == ""


def test_convert_run_theme_and_css(page, tmp_path, studio_context):
    css = tmp_path / "override.css"
    css.write_text(".override { margin: 0; }", encoding="utf-8")

    exit_code = handle_convert(
        ["run", str(page), "--theme", "120,50,40", "--css", str(css)], studio_context
    )
    content = (page.parent / "SignupPage.tsx").read_text(encoding="utf-8")

    assert exit_code == 0
    assert "--m-accent-h: 120;" in content
    assert ".override { margin: 0; }" in content
    assert ".x { color: blue; }" not in content


def test_convert_run_uses_session_theme(page, studio_context):
    studio_context.theme = studio_context.theme.model_copy(update={"hue": 10})
    handle_convert(["run", str(page)], studio_context)
    content = (page.parent / "SignupPage.tsx").read_text(encoding="utf-8")
    assert "--m-accent-h: 10;" in content


@pytest.mark.parametrize("theme", ["abc", "1,2", "400,50,50"])
def test_convert_run_invalid_theme(page, studio_context, capsys, theme):
    assert handle_convert(["run", str(page), "--theme", theme], studio_context) == 1
    assert "❌ Invalid --theme" in capsys.readouterr().out


def test_convert_run_name_requires_single_file(page, tmp_path, studio_context, capsys):
    other = tmp_path / "other.html"
    other.write_text("<p>x</p>", encoding="utf-8")

    assert handle_convert(["run", str(page), str(other), "--name", "X"], studio_context) == 1
    assert "--name can only be used with a single file" in capsys.readouterr().out


def test_convert_run_multiple_files(page, tmp_path, studio_context):
    other = tmp_path / "other.html"
    other.write_text("<p>x</p>", encoding="utf-8")

    assert handle_convert(["run", str(page), str(other)], studio_context) == 0
    assert (tmp_path / "SignupPage.tsx").exists()
    assert (tmp_path / "Other.tsx").exists()
    assert len(studio_context.history) == 2


def test_convert_run_missing_file(tmp_path, studio_context, capsys):
    """Een ontbrekend bestand geeft een fout, maar geen crash."""
    exit_code = handle_convert(["run", str(tmp_path / "missing.html")], studio_context)
    assert exit_code == 1
    assert "❌" in capsys.readouterr().out
    assert studio_context.last_result is None


def test_convert_run_respects_overwrite_setting(page, studio_context, restore_config, capsys):
    assert handle_convert(["run", str(page)], studio_context) == 0
    restore_config.set_nested("export.overwrite", "false")

    assert handle_convert(["run", str(page)], studio_context) == 1
    assert "already exists" in capsys.readouterr().out


def test_convert_run_extension_setting(page, studio_context, restore_config):
    restore_config.set_nested("export.extension", "jsx")
    assert handle_convert(["run", str(page)], studio_context) == 0
    assert (page.parent / "SignupPage.jsx").exists()


def test_convert_run_script_mode_setting(tmp_path, studio_context, restore_config):
    source = tmp_path / "app.html"
    source.write_text("<body><p>x</p><script>start();</script></body>", encoding="utf-8")
    restore_config.set_nested("transpiler.script_mode", "inline")

    assert handle_convert(["run", str(source)], studio_context) == 0
    content = (tmp_path / "App.tsx").read_text(encoding="utf-8")
    assert "try {" in content
    assert "start();" in content


def test_convert_last(page, studio_context, capsys):
    assert handle_convert(["last"], studio_context) == 1
    assert "No conversion has been run" in capsys.readouterr().out

    handle_convert(["run", str(page)], studio_context)
    capsys.readouterr()

    assert handle_convert(["last"], studio_context) == 0
    out = capsys.readouterr().out
    assert "Component: SignupPage" in out
    assert f"Output: {(page.parent / 'SignupPage.tsx').resolve()}" in out
    assert "  - Main2 [stateful]" in out
    assert "  - email (string) = 'a@b.com'" in out


def test_convert_without_args_prints_help(studio_context, capsys):
    assert handle_convert([], studio_context) == 0
    assert "usage: convert" in capsys.readouterr().out


def test_convert_invalid_arguments(studio_context):
    assert handle_convert(["run"], studio_context) == 1


def test_convert_last_after_stdout(page, studio_context, capsys):
    handle_convert(["run", str(page), "--stdout", "--name", "Preview"], studio_context)
    capsys.readouterr()

    assert handle_convert(["last"], studio_context) == 0
    out = capsys.readouterr().out
    assert "Component: Preview" in out
    assert "Output: <stdout>" in out
