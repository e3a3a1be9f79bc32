from periodicity.palette import BUTTON, MAIN_OUTLINE_CLR, Color
from periodicity.properties import (
    ClickAction,
    ColorPair,
    PCastbar,
    PClickable,
    PHealthbar,
    PRect,
    PState,
    PText,
    PTooltipData,
    PropertiesEnum,
)


def test_from_colors_with_outline():
    pair = ColorPair.from_colors(BUTTON, MAIN_OUTLINE_CLR)
    assert pair.fill == (4, 66, 137)
    assert pair.outline == (24, 26, 28)


def test_from_colors_without_outline():
    pair = ColorPair.from_colors(Color(9, 8, 7))
    assert pair == ColorPair((9, 8, 7), None)


def test_rect_defaults():
    rect = PRect(id=3)
    assert (rect.x, rect.y, rect.width, rect.height) == (10, 10, 10, 10)
    assert rect.colors == ColorPair((19, 81, 150), (24, 26, 28))
    assert rect.draw is False
    assert rect.pressed is None and rect.hovered is None


def test_default_colour_pairs_are_independent():
    a, b = PRect(id=1), PRect(id=2)
    a.colors.fill = (1, 1, 1)
    assert b.colors.fill == (19, 81, 150)


def test_text_defaults():
    text = PText(id=0)
    assert text.text == "Run Code"
    assert (text.x, text.y) == (50, 50)
    assert text.lifetime is None


def test_bars_default_visible():
    assert PHealthbar(id=0).draw is True
    assert PHealthbar(id=0).strata == 20
    assert PCastbar(id=0).icon_name == "miasma"


def test_state_vector_length():
    state = PState(id=0)
    assert len(state.state_vec) == 500
    assert set(state.state_vec) == {0}


def test_tooltip_and_clickable_defaults():
    assert PTooltipData(id=0).header == "asd"
    clickable = PClickable(id=0)
    assert clickable.action is ClickAction.RUN_BUTTON
    assert clickable.rect_reference_id is None


def test_clickable_holds_every_action():
    clickables = [PClickable(id=i, action=a) for i, a in enumerate(ClickAction)]
    assert [c.action.name for c in clickables][2:] == list("ABCDEFGH")
    assert [c.id for c in clickables] == list(range(len(clickables)))
    assert PropertiesEnum.TOOLTIP_DATA in set(PropertiesEnum)