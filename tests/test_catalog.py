import pytest

from stylist.catalog import (
    BEARD_STYLES, HAIR_STYLES, FaceShape,
    beard_styles_for, hair_styles_for, rule_based_recommendations,
)


@pytest.mark.parametrize("shape", ["oval", "round", "square", "oblong"])
def test_every_shape_has_hair_and_beard(shape):
    result = rule_based_recommendations(shape)

    assert any(r.category == "hair" for r in result)
    assert any(r.category == "beard" for r in result)
    for rec in result:
        assert 0 <= rec.suitability <= 100
        assert rec.tips
        assert rec.styling_products is None


@pytest.mark.parametrize("label", ["heart", "", "triangle", None])
def test_unknown_shape_falls_back_to_oval(label):
    assert rule_based_recommendations(label) == rule_based_recommendations("oval")


def test_labels_are_case_and_space_insensitive():
    assert FaceShape.from_label(" ROUND ") is FaceShape.ROUND
    assert hair_styles_for("Square") == hair_styles_for(FaceShape.SQUARE)


def test_result_is_hair_then_beard():
    result = rule_based_recommendations("round")
    assert result == hair_styles_for("round") + beard_styles_for("round")
    assert [r.id for r in result] == ["round-1", "round-2", "round-beard-1"]


def test_returned_styles_are_copies():
    styles = hair_styles_for("oval")
    styles[0].tips.append("mutated")

    assert "mutated" not in hair_styles_for("oval")[0].tips


def test_tables_cover_every_shape():
    assert set(HAIR_STYLES) == set(FaceShape)
    assert set(BEARD_STYLES) == set(FaceShape)


@pytest.mark.parametrize("shape", list(FaceShape))
def test_ids_unique_within_set(shape):
    ids = [r.id for r in rule_based_recommendations(shape)]
    assert len(ids) == len(set(ids))
