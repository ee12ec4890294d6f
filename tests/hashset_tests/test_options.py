import pytest


def test_display_options_defaults():
    from hashset.options import DisplayOptions
    from hashset.rendering import TruncatingDisplayPolicy

    options = DisplayOptions()
    assert options.policy == TruncatingDisplayPolicy(100)
    assert options.sort_elements
    assert options.format_element is repr


def test_display_options_from_env(monkeypatch):
    from hashset.options import DisplayOptions
    from hashset.options import ENV_OPTION_HASHSET_MAX_DISPLAY_ELEMENTS
    from hashset.options import ENV_OPTION_HASHSET_SORT_DISPLAY
    from hashset.rendering import FullDisplayPolicy, TruncatingDisplayPolicy

    monkeypatch.delenv(ENV_OPTION_HASHSET_MAX_DISPLAY_ELEMENTS, raising=False)
    monkeypatch.delenv(ENV_OPTION_HASHSET_SORT_DISPLAY, raising=False)
    assert DisplayOptions.from_env() == DisplayOptions()

    monkeypatch.setenv(ENV_OPTION_HASHSET_MAX_DISPLAY_ELEMENTS, "5")
    monkeypatch.setenv(ENV_OPTION_HASHSET_SORT_DISPLAY, "false")
    options = DisplayOptions.from_env()
    assert options.policy == TruncatingDisplayPolicy(5)
    assert not options.sort_elements

    monkeypatch.setenv(ENV_OPTION_HASHSET_MAX_DISPLAY_ELEMENTS, "0")
    monkeypatch.setenv(ENV_OPTION_HASHSET_SORT_DISPLAY, "1")
    options = DisplayOptions.from_env()
    assert options.policy == FullDisplayPolicy()
    assert options.sort_elements


def test_display_options_from_env_invalid(monkeypatch):
    from hashset.options import DisplayOptions
    from hashset.options import ENV_OPTION_HASHSET_MAX_DISPLAY_ELEMENTS

    monkeypatch.setenv(ENV_OPTION_HASHSET_MAX_DISPLAY_ELEMENTS, "many")
    with pytest.raises(ValueError):
        DisplayOptions.from_env()

    monkeypatch.setenv(ENV_OPTION_HASHSET_MAX_DISPLAY_ELEMENTS, "-2")
    with pytest.raises(ValueError):
        DisplayOptions.from_env()


def test_is_true_in_env(monkeypatch):
    from hashset.options import is_true_in_env

    monkeypatch.delenv("HASHSET_TEST_FLAG", raising=False)
    assert not is_true_in_env("HASHSET_TEST_FLAG")
    assert is_true_in_env("HASHSET_TEST_FLAG", True)

    for value in ("1", "True", "true"):
        monkeypatch.setenv("HASHSET_TEST_FLAG", value)
        assert is_true_in_env("HASHSET_TEST_FLAG")

    for value in ("0", "False", "false"):
        monkeypatch.setenv("HASHSET_TEST_FLAG", value)
        assert not is_true_in_env("HASHSET_TEST_FLAG", True)

    monkeypatch.setenv("HASHSET_TEST_FLAG", "maybe")
    assert is_true_in_env("HASHSET_TEST_FLAG", True)


def test_default_display_options(monkeypatch):
    from hashset import HashSet
    from hashset import options
    from hashset.options import DisplayOptions
    from hashset.rendering import TruncatingDisplayPolicy

    custom = DisplayOptions(policy=TruncatingDisplayPolicy(2))
    monkeypatch.setattr(options, "DEFAULT_DISPLAY_OPTIONS", custom)

    s = HashSet(1, 2, 3)
    assert s.display_options is custom
    assert str(s) == "{…3 elements…}"


def test_display_options_copy():
    from hashset.options import DisplayOptions
    from hashset.rendering import FullDisplayPolicy

    options = DisplayOptions()
    new_options = options.copy(policy=FullDisplayPolicy())
    assert new_options.policy == FullDisplayPolicy()
    assert new_options.sort_elements == options.sort_elements
    assert new_options != options
    assert options.copy() == options
    assert "FullDisplayPolicy()" in repr(new_options)
