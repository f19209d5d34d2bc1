# tests/core/test_theme_handler.py
import pytest

from manifest_shell.core.context.studio_context import StudioContext
from manifest_shell.core.handlers.theme_handler import handle_theme


@pytest.fixture
def studio_context():
    return StudioContext()


def test_theme_show_defaults(studio_context, capsys):
    """Het standaardthema komt uit settings.json."""
    assert handle_theme(["show"], studio_context) == 0
    assert "hue=217 saturation=91% lightness=60%" in capsys.readouterr().out


def test_theme_set(studio_context, capsys):
    assert handle_theme(["set", "120", "50", "40"], studio_context) == 0
    assert (studio_context.theme.hue, studio_context.theme.saturation, studio_context.theme.lightness) == (120, 50, 40)
    assert "✅ Theme set to hsl(120, 50%, 40%)." in capsys.readouterr().out


@pytest.mark.parametrize("args", [
    ["set", "400", "50", "50"],
    ["set", "120", "-1", "50"],
    ["set", "red", "50", "50"],
])
def test_theme_set_rejects_invalid_values(studio_context, capsys, args):
    assert handle_theme(args, studio_context) == 1
    assert "❌ Invalid theme" in capsys.readouterr().out
    assert studio_context.theme.hue == 217


def test_theme_set_usage(studio_context, capsys):
    assert handle_theme(["set", "120"], studio_context) == 1
    assert "Usage: theme set" in capsys.readouterr().out


def test_theme_reset(studio_context):
    handle_theme(["set", "1", "2", "3"], studio_context)
    assert handle_theme(["reset"], studio_context) == 0
    assert studio_context.theme.hue == 217


def test_theme_unknown_subcommand(studio_context, capsys):
    assert handle_theme(["paint"], studio_context) == 1
    assert "Unknown command: 'theme paint'." in capsys.readouterr().out
