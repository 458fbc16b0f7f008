"""Tests for parameter presets and validation."""

import pytest
from quadtree_lib.ops.build import QuadTreeParams
from quadtree_lib.params import get_preset, list_presets, validate_params, validate_and_warn


def test_list_presets():
    presets = list_presets()
    assert isinstance(presets, list)
    assert "default" in presets
    assert "debug" in presets


def test_get_preset():
    params = get_preset("default")
    assert params.max_depth == 30
    assert params.max_items == 30


def test_get_unknown_preset():
    with pytest.raises(ValueError, match="Unknown preset"):
        get_preset("does_not_exist")


@pytest.mark.parametrize("name", list_presets())
def test_presets_are_valid(name):
    is_valid, warnings = validate_params(get_preset(name))
    assert is_valid is True
    assert warnings == []


def test_validate_params_out_of_range():
    is_valid, warnings = validate_params(QuadTreeParams(max_depth=80, max_items=0))
    assert is_valid is False
    assert any("max_depth" in w for w in warnings)
    assert any("max_items" in w for w in warnings)


def test_validate_params_depth_zero():
    is_valid, warnings = validate_params(QuadTreeParams(max_depth=0))
    assert is_valid is False
    assert any("disables subdivision" in w for w in warnings)


def test_validate_params_expected_points():
    params = QuadTreeParams(max_depth=1, max_items=2)
    is_valid, warnings = validate_params(params, expected_points=100)
    assert is_valid is False
    assert any("expected 100" in w for w in warnings)

    assert validate_params(params, expected_points=8)[0] is True


def test_validate_and_warn_prints(capsys):
    params = QuadTreeParams(max_depth=0)
    assert validate_and_warn(params) is params

    captured = capsys.readouterr()
    assert "Parameter validation warnings" in captured.out


def test_validate_and_warn_silent_when_valid(capsys):
    validate_and_warn(get_preset("default"))
    assert capsys.readouterr().out == ""


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
