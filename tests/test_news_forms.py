import json

import pytest

from src.core.exceptions import BadRequestError, ValidationFailedError
from src.news.schemas.requests import NewsCreateForm, NewsEditForm, decode_form


def _decode(form_cls, payload):
    return decode_form(form_cls, json.dumps(payload).encode())


class TestNewsCreateForm:

    def test_valid_form_is_trimmed(self):
        form = _decode(NewsCreateForm, {"Title": "  Amazing news ", "Content": "\tBody\n", "Categories": [1, 2]})

        assert form.title == "Amazing news"
        assert form.content == "Body"
        assert form.categories == [1, 2]

    def test_categories_optional(self):
        form = _decode(NewsCreateForm, {"Title": "Title", "Content": "Content"})

        assert form.categories is None

    def test_normalization_is_idempotent(self):
        form = _decode(NewsCreateForm, {"Title": "  Title  ", "Content": "  Content  "})
        again = NewsCreateForm.model_validate(form.model_dump(by_alias=True))

        assert again == form

    def test_title_at_max_length(self):
        form = _decode(NewsCreateForm, {"Title": "a" * 255, "Content": "x"})

        assert len(form.title) == 255

    @pytest.mark.parametrize("payload, message", [
        ({"Title": "", "Content": "x"}, "Title: field is required"),
        ({"Title": "   ", "Content": "x"}, "Title: field is required"),
        ({"Content": "x"}, "Title: field is required"),
        ({"Title": "x"}, "Content: field is required"),
        ({"Title": "x", "Content": " \n "}, "Content: field is required"),
        ({"Title": "a" * 256, "Content": "x"}, "Title: maximum length is 255"),
        ({"Title": "x", "Content": "y", "Categories": [1, 0]}, "Categories[1]: must be greater than 0"),
    ])
    def test_rule_violations(self, payload, message):
        with pytest.raises(ValidationFailedError) as exc_info:
            _decode(NewsCreateForm, payload)

        assert exc_info.value.message == message
        assert exc_info.value.status_code == 400

    def test_only_first_violation_reported(self):
        with pytest.raises(ValidationFailedError) as exc_info:
            _decode(NewsCreateForm, {"Title": "", "Content": "", "Categories": [-1]})

        assert exc_info.value.message == "Title: field is required"

    def test_trailing_whitespace_not_counted_towards_max_length(self):
        form = _decode(NewsCreateForm, {"Title": "a" * 255 + "   ", "Content": "x"})

        assert form.title == "a" * 255


class TestNewsEditForm:

    def test_absent_and_null_fields_are_none(self):
        form = _decode(NewsEditForm, {"Title": "New", "Content": None})

        assert form.title == "New"
        assert form.content is None
        assert form.categories is None

    def test_empty_categories_kept(self):
        form = _decode(NewsEditForm, {"Categories": []})

        assert form.categories == []
        assert form.title is None

    @pytest.mark.parametrize("payload", [{}, {"Title": None, "Content": None, "Categories": None}, {"Other": "x"}])
    def test_no_fields_to_update(self, payload):
        with pytest.raises(ValidationFailedError) as exc_info:
            _decode(NewsEditForm, payload)

        assert exc_info.value.message == "body must contain at least one field to update (Title, Content, or Categories)"

    @pytest.mark.parametrize("payload, message", [
        ({"Title": "     "}, "Title: minimum length is 1"),
        ({"Title": ""}, "Title: minimum length is 1"),
        ({"Content": "     "}, "Content: minimum length is 1"),
        ({"Title": "a" * 256}, "Title: maximum length is 255"),
        ({"Categories": [3, -4]}, "Categories[1]: must be greater than 0"),
    ])
    def test_rule_violations(self, payload, message):
        with pytest.raises(ValidationFailedError) as exc_info:
            _decode(NewsEditForm, payload)

        assert exc_info.value.message == message

    def test_trims_present_fields(self):
        form = _decode(NewsEditForm, {"Title": "  New title  "})

        assert form.title == "New title"


@pytest.mark.parametrize("form_cls, payload", [
    (NewsCreateForm, {"Title": "x", "Content": "y", "Categories": [2 ** 63]}),
    (NewsCreateForm, {"Title": "", "Content": "y", "Categories": [10 ** 20]}),
    (NewsEditForm, {"Categories": [1, 2 ** 64]}),
])
def test_category_outside_id_range_fails_decoding(form_cls, payload):
    with pytest.raises(BadRequestError) as exc_info:
        _decode(form_cls, payload)

    assert exc_info.value.message == "Failed to parse request body"
