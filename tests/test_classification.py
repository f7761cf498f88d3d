"""Unit tests for failure classification."""
import json

from hypothesis import given
from hypothesis import strategies as st

from insureai.inference import InferenceError, InvalidResponseError
from insureai.orchestrator import (
    GENERIC_FALLBACK,
    RETRYABLE_FALLBACK,
    FailureKind,
    classify_failure,
    extract_error_payload,
    fallback_message,
)


class TestExtractErrorPayload:
    """Tests for reading structured payloads out of error text."""

    def test_whole_message_is_json(self):
        """Test decoding a message that is exactly a JSON object."""
        assert extract_error_payload('{"retryable": true}') == {"retryable": True}

    def test_json_embedded_in_text(self):
        """Test decoding a JSON object surrounded by other text."""
        text = 'Edge Function returned 503: {"error": "busy", "retryable": true} (request 42)'
        assert extract_error_payload(text) == {"error": "busy", "retryable": True}

    def test_closing_brace_inside_string_value(self):
        """Test that braces inside JSON strings do not end the object early."""
        text = 'Edge Function returned 503: {"error": "unexpected }", "retryable": true}'
        assert extract_error_payload(text) == {"error": "unexpected }", "retryable": True}

    def test_skips_brace_that_does_not_start_an_object(self):
        """Test that a stray brace before the payload is skipped."""
        text = 'bad template {name} -> {"retryable": true}'
        assert extract_error_payload(text) == {"retryable": True}

    def test_plain_text_returns_none(self):
        """Test that text without braces has no payload."""
        assert extract_error_payload("Failed to fetch") is None

    def test_malformed_json_returns_none(self):
        """Test that broken JSON is not an error."""
        assert extract_error_payload("oops {retryable: yes") is None
        assert extract_error_payload("{not json}") is None

    def test_non_object_json_returns_none(self):
        """Test that JSON scalars are not payloads."""
        assert extract_error_payload('"{"') is None

    def test_empty_and_none(self):
        """Test empty inputs."""
        assert extract_error_payload("") is None
        assert extract_error_payload(None) is None


class TestClassifyFailure:
    """Tests for classify_failure."""

    def test_structured_retryable_message(self):
        """Test an error whose message embeds retryable: true."""
        error = Exception(json.dumps({"retryable": True}))
        assert classify_failure(error) == FailureKind.RETRYABLE

    def test_structured_non_retryable_message(self):
        """Test an error whose message embeds retryable: false."""
        error = Exception(json.dumps({"error": "bad request", "retryable": False}))
        assert classify_failure(error) == FailureKind.UNKNOWN

    def test_retryable_must_be_boolean_true(self):
        """Test that truthy non-boolean values do not count as retryable."""
        assert classify_failure(Exception('{"retryable": "true"}')) == FailureKind.UNKNOWN
        assert classify_failure(Exception('{"retryable": 1}')) == FailureKind.UNKNOWN

    def test_prefixed_payload_with_brace_in_string(self):
        """Test a prefixed retryable payload whose error text contains a brace."""
        error = Exception('Edge Function returned 503: {"error": "unexpected }", "retryable": true}')
        assert classify_failure(error) == FailureKind.RETRYABLE

    def test_plain_network_error(self):
        """Test an unstructured network error."""
        assert classify_failure(ConnectionError("Failed to fetch")) == FailureKind.UNKNOWN

    def test_none_is_unknown(self):
        """Test the empty-reply case (no exception)."""
        assert classify_failure(None) == FailureKind.UNKNOWN

    def test_typed_retryable_takes_precedence(self):
        """Test that the typed attribute wins over the message text."""
        error = InferenceError('{"retryable": false}', retryable=True)
        assert classify_failure(error) == FailureKind.RETRYABLE

        error = InferenceError('{"retryable": true}', retryable=False)
        assert classify_failure(error) == FailureKind.UNKNOWN

    def test_untyped_inference_error_falls_back_to_text(self):
        """Test that an InferenceError without a typed flag is parsed."""
        error = InferenceError('service said {"retryable": true}')
        assert classify_failure(error) == FailureKind.RETRYABLE

    def test_from_payload_round_trips(self):
        """Test that from_payload sets both channels consistently."""
        error = InferenceError.from_payload({"retryable": True}, message="unavailable", status_code=503)

        assert error.retryable is True
        assert error.status_code == 503
        assert json.loads(error.message) == {"retryable": True, "error": "unavailable"}
        assert classify_failure(error) == FailureKind.RETRYABLE

    def test_invalid_response_is_unknown(self):
        """Test that an invalid response shape is not retryable."""
        assert classify_failure(InvalidResponseError()) == FailureKind.UNKNOWN

    def test_error_with_exploding_str(self):
        """Test that an error whose text cannot be read is unknown."""

        class Unprintable(Exception):
            def __str__(self):
                raise RuntimeError("no text")

        assert classify_failure(Unprintable()) == FailureKind.UNKNOWN

    @given(st.text())
    def test_never_raises(self, text: str):
        """Property test: classification never throws for any message."""
        assert classify_failure(Exception(text)) in (FailureKind.RETRYABLE, FailureKind.UNKNOWN)


class TestFallbackMessage:
    """Tests for fallback texts."""

    def test_fallback_texts(self):
        """Test the canned replies for each category."""
        assert fallback_message(FailureKind.RETRYABLE) == RETRYABLE_FALLBACK
        assert fallback_message(FailureKind.UNKNOWN) == GENERIC_FALLBACK
        assert "temporarily unavailable" in RETRYABLE_FALLBACK
        assert "contact support" in GENERIC_FALLBACK
