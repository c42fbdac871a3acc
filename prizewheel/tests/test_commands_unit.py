from __future__ import annotations


def _config(*options):
    from prizewheel.core.config import WheelConfig

    return WheelConfig(options=options)


def test_add_joins_words_into_one_label():
    from prizewheel.core.commands import run_command

    result = run_command("add Free   Pizza Friday", _config("a"))

    assert result.needs_rebuild
    assert result.config.options == ("a", "Free Pizza Friday")


def test_add_without_label_changes_nothing():
    from prizewheel.core.commands import run_command

    result = run_command("add", _config("a"))
    assert not result.needs_rebuild
    assert result.message


def test_remove_first_match():
    from prizewheel.core.commands import run_command

    result = run_command("remove Option 2", _config("Option 1", "Option 2", "Option 2"))
    assert result.config.options == ("Option 1", "Option 2")


def test_remove_missing_label_is_a_no_op():
    from prizewheel.core.commands import run_command

    cfg = _config("a")
    result = run_command("remove b", cfg)
    assert result.config is None
    assert "b" in result.message
    assert cfg.options == ("a",)


def test_blank_and_unknown_commands():
    from prizewheel.core.commands import run_command

    cfg = _config("a")
    assert run_command("   ", cfg) == run_command("", cfg)
    assert not run_command("", cfg).needs_rebuild

    unknown = run_command("spin now", cfg)
    assert not unknown.needs_rebuild
    assert "spin" in unknown.message


def test_command_names_are_case_sensitive():
    from prizewheel.core.commands import run_command

    cfg = _config("a")
    result = run_command("ADD x", cfg)

    assert not result.needs_rebuild
    assert "ADD" in result.message
    assert run_command("Remove a", cfg).config is None
