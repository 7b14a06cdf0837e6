"""Unit tests for ResponseEnvelope and related models."""

import pytest
from pydantic import ValidationError

from twitter.api.core import PartialError
from twitter.api.models import ErrorDetail, PageMeta, ResponseEnvelope, Tweet, User


class TestResponseEnvelope:
    """Test envelope presence semantics."""

    def test_absent_keys_stay_unset(self):
        """Test the dumped envelope reproduces the body's key set."""
        body = {"data": {}, "meta": {"next_token": "T"}}
        envelope = ResponseEnvelope.model_validate(body)
        assert envelope.model_dump(exclude_unset=True) == body
        assert envelope.errors is None

    def test_next_token(self):
        assert ResponseEnvelope.model_validate({"meta": {"next_token": "T"}}).next_token == "T"
        assert ResponseEnvelope.model_validate({"meta": {"result_count": 0}}).next_token is None
        assert ResponseEnvelope.model_validate({}).next_token is None

    def test_typed_data(self):
        """Test a parametrized envelope validates its payload."""
        envelope = ResponseEnvelope[Tweet].model_validate(
            {"data": {"id": "20", "text": "just setting up my twttr", "lang": "en"}}
        )
        assert envelope.data == Tweet(id="20", text="just setting up my twttr", lang="en")
        assert envelope.data.model_extra == {"lang": "en"}

    def test_typed_data_rejects_wrong_shape(self):
        with pytest.raises(ValidationError):
            ResponseEnvelope[list[User]].model_validate({"data": {"id": "1"}})

    def test_partial_success(self):
        """Test data and errors coexist without raising."""
        envelope = ResponseEnvelope[list[Tweet]].model_validate(
            {
                "data": [{"id": "20", "text": "hi"}],
                "errors": [{"title": "Not Found Error", "value": "21", "resource_type": "tweet"}],
            }
        )
        assert envelope.has_errors
        assert envelope.is_partial
        assert envelope.errors[0].value == "21"

    def test_errors_without_data_is_not_partial(self):
        envelope = ResponseEnvelope.model_validate({"errors": [{"title": "Not Found Error"}]})
        assert envelope.has_errors
        assert not envelope.is_partial

    def test_raise_for_errors(self):
        """Test raise_for_errors raises PartialError carrying errors and data."""
        envelope = ResponseEnvelope.model_validate(
            {"data": [1], "errors": [{"detail": "Could not find tweet with ids: [21]."}]}
        )
        with pytest.raises(PartialError) as exc_info:
            envelope.raise_for_errors()

        assert exc_info.value.data == [1]
        assert exc_info.value.errors[0].detail == "Could not find tweet with ids: [21]."
        assert "Could not find tweet" in str(exc_info.value)

    def test_raise_for_errors_returns_self_when_clean(self):
        envelope = ResponseEnvelope.model_validate({"data": [1]})
        assert envelope.raise_for_errors() is envelope

    def test_envelope_is_frozen(self):
        envelope = ResponseEnvelope.model_validate({"data": 1})
        with pytest.raises(ValidationError):
            envelope.data = 2


class TestErrorDetailAndMeta:
    """Test nested envelope models."""

    def test_error_detail_keeps_unknown_keys(self):
        detail = ErrorDetail.model_validate({"title": "x", "message": "y"})
        assert detail.model_extra == {"message": "y"}
        assert detail.describe() == "x"

    def test_error_detail_describe_fallback(self):
        assert ErrorDetail().describe() == "unknown error"

    def test_page_meta_fields(self):
        meta = PageMeta.model_validate({"result_count": 2, "newest_id": "9", "oldest_id": "1"})
        assert meta.result_count == 2
        assert meta.next_token is None
