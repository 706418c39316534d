import pydantic
import pytest

from intercom_articles_mcp.models import (
    CreateArticleInput,
    GetArticleInput,
    ListArticlesInput,
    ListCollectionsInput,
    UpdateCollectionInput,
)


def test_list_articles_defaults():
    params = ListArticlesInput()
    assert (params.page, params.per_page) == (1, 10)


def test_list_collections_defaults():
    params = ListCollectionsInput()
    assert (params.page, params.per_page) == (1, 50)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ({"page": 0}, (1, 10)),
        ({"page": -3, "per_page": 0}, (1, 1)),
        ({"page": 2.9, "per_page": 12.5}, (2, 12)),
        ({"per_page": 999}, (1, 50)),
        ({"page": None, "per_page": None}, (1, 10)),
    ],
)
def test_article_pagination_is_clamped(raw, expected):
    params = ListArticlesInput.model_validate(raw)
    assert (params.page, params.per_page) == expected


def test_collection_per_page_clamps_at_150():
    assert ListCollectionsInput.model_validate({"per_page": 999}).per_page == 150
    assert ListCollectionsInput.model_validate({"per_page": 120}).per_page == 120


def test_numeric_id_is_coerced_to_string():
    assert GetArticleInput.model_validate({"id": 42}).id == "42"


def test_blank_id_is_rejected():
    with pytest.raises(pydantic.ValidationError):
        GetArticleInput.model_validate({"id": "   "})


def test_unknown_arguments_are_rejected():
    with pytest.raises(pydantic.ValidationError):
        GetArticleInput.model_validate({"id": "1", "locale": "en"})


def test_article_state_must_be_known():
    with pytest.raises(pydantic.ValidationError):
        CreateArticleInput.model_validate(
            {"title": "t", "body": "<p>b</p>", "author_id": 1, "state": "archived"}
        )


def test_collection_update_tracks_explicit_fields():
    params = UpdateCollectionInput.model_validate({"id": "7", "description": "", "parent_id": None})
    assert params.model_fields_set == {"id", "description", "parent_id"}
