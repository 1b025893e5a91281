import pytest

from enginecore.ui_layouts import HighlightLayout, TransformLayout, TransformProp


@pytest.fixture
def recorder():
    calls = []

    def record(*args):
        calls.append(args)

    return calls, record


def test_transform_defaults():
    layout = TransformLayout()
    assert layout.position == (0.0, 0.0, 0.0)
    assert layout.scale == (1.0, 1.0, 1.0)
    assert layout.rotation == (0.0, 0.0, 0.0)


def test_set_props_does_not_report(recorder):
    calls, record = recorder
    layout = TransformLayout(record)
    layout.set_props((1, 2, 3), (4, 5, 6), (7, 8, 9))
    assert calls == []
    assert layout.position == (1.0, 2.0, 3.0)
    assert layout.scale == (4.0, 5.0, 6.0)
    assert layout.rotation == (7.0, 8.0, 9.0)


@pytest.mark.parametrize(
    "prop, attr",
    [
        (TransformProp.POSITION, "position"),
        (TransformProp.SCALE, "scale"),
        (TransformProp.ROTATION, "rotation"),
    ],
)
def test_edit_sets_and_reports(recorder, prop, attr):
    calls, record = recorder
    layout = TransformLayout(record)
    result = layout.edit(prop, (0.5, -1.5, 2.0))
    assert result == (0.5, -1.5, 2.0)
    assert getattr(layout, attr) == (0.5, -1.5, 2.0)
    assert calls == [((0.5, -1.5, 2.0), prop)]


def test_resets_report_defaults(recorder):
    calls, record = recorder
    layout = TransformLayout(record)
    layout.set_props((3, 3, 3), (2, 2, 2), (45, 0, 0))
    layout.reset_position()
    layout.reset_scale()
    layout.reset_rotation()
    assert layout.position == (0.0, 0.0, 0.0)
    assert layout.scale == (1.0, 1.0, 1.0)
    assert layout.rotation == (0.0, 0.0, 0.0)
    assert [prop for _, prop in calls] == [
        TransformProp.POSITION,
        TransformProp.SCALE,
        TransformProp.ROTATION,
    ]


def test_edit_rejects_wrong_length():
    layout = TransformLayout()
    with pytest.raises(ValueError):
        layout.edit(TransformProp.POSITION, (1.0, 2.0))


def test_highlight_set_color_activates_without_report(recorder):
    calls, record = recorder
    layout = HighlightLayout(record)
    assert layout.is_active is False
    layout.set_color((0.2, 0.4, 0.6))
    assert layout.is_active is True
    assert layout.color == (0.2, 0.4, 0.6)
    assert calls == []


def test_highlight_edit_reports(recorder):
    calls, record = recorder
    layout = HighlightLayout(record)
    layout.edit((1, 0, 0), False, True)
    assert layout.color == (1.0, 0.0, 0.0)
    assert layout.is_active is False
    assert layout.mode is True
    assert calls == [((1.0, 0.0, 0.0), False, True)]