import pytest

from hanschunks.element import Element, ElementType, ElementWeights, SplitPoint


def make(element_type, content="text"):
    return Element(element_type, content, 1)


@pytest.mark.parametrize(
    "element_type, expected",
    [
        (ElementType.heading(1), True),
        (ElementType.LIST_ITEM, True),
        (ElementType.CODE_BLOCK, True),
        (ElementType.TABLE, True),
        (ElementType.PARAGRAPH, False),
        (ElementType.QUOTE, False),
        (ElementType.EMPTY, False),
        (ElementType.FOOTER, False),
    ],
)
def test_split_boundary(element_type, expected):
    assert make(element_type).is_split_boundary() is expected


@pytest.mark.parametrize(
    "element_type, attr",
    [
        (ElementType.CODE_BLOCK, "code_block"),
        (ElementType.TABLE, "table"),
        (ElementType.LIST_ITEM, "list_item"),
        (ElementType.PARAGRAPH, "paragraph"),
        (ElementType.QUOTE, "quote"),
        (ElementType.EMPTY, "empty"),
        (ElementType.FOOTER, "footer"),
    ],
)
def test_weight_of_plain_kinds(element_type, attr):
    weights = ElementWeights()
    assert make(element_type).weight(weights) == getattr(weights, attr)


def test_heading_level_zero_weight_is_base():
    weights = ElementWeights(heading_base=55.0, heading_level_penalty=7.0)
    assert make(ElementType.heading(0)).weight(weights) == 55.0


def test_heading_weight_falls_with_level():
    weights = ElementWeights()
    values = [make(ElementType.heading(level)).weight(weights) for level in range(1, 5)]
    assert values == sorted(values, reverse=True)
    assert len(set(values)) == len(values)


def test_default_weights():
    weights = ElementWeights()
    assert weights.heading_base == 100.0
    assert weights.heading_level_penalty == 10.0
    assert weights.code_block == 80.0
    assert weights.footer == 0.0


@pytest.mark.parametrize("ending", [":", "：", ",", "，", "、", ";", "；"])
def test_strong_connection_endings(ending):
    assert make(ElementType.PARAGRAPH, f"下面是内容{ending}  ").has_strong_connection()


@pytest.mark.parametrize("content", ["", "   ", "结束了。", "end"])
def test_no_strong_connection(content):
    assert not make(ElementType.PARAGRAPH, content).has_strong_connection()


def test_char_count_counts_characters():
    content = "中文abc"
    assert make(ElementType.PARAGRAPH, content).char_count == len(content)


def test_unknown_kind_rejected():
    with pytest.raises(ValueError):
        ElementType("sidebar")


def test_level_only_for_headings():
    with pytest.raises(ValueError):
        ElementType("paragraph", 2)


def test_heading_level_range():
    with pytest.raises(ValueError):
        ElementType.heading(256)


def test_heading_equality():
    assert ElementType.heading(2) == ElementType.heading(2)
    assert ElementType.heading(2) != ElementType.heading(3)
    assert ElementType.heading(2).is_heading
    assert not ElementType.PARAGRAPH.is_heading


def test_split_point_fields():
    point = SplitPoint(3, 1.5, 42)
    assert (point.index, point.weight, point.char_count) == (3, 1.5, 42)