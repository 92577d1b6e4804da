"""
Tests for status parsing and envelope unwrapping.
"""

import pytest

from api.status import Status, unwrap_envelope


@pytest.fixture
def raw_status():
    return {
        "timestamp": "2024-06-01T12:00:00.000Z",
        "error_code": 0,
        "error_message": None,
        "elapsed": 10,
        "credit_count": 1,
        "notice": None,
    }


class TestStatus:
    """Tests for the Status dataclass."""

    def test_from_dict(self, raw_status):
        status = Status.from_dict({**raw_status, "total_count": 5})

        assert status.timestamp == "2024-06-01T12:00:00.000Z"
        assert status.credit_count == 1
        assert status.to_dict() == raw_status

    @pytest.mark.parametrize("raw, expected", [("0", 0), ("1008", 1008), (" 42 ", 42), ("", ""), ("n/a", "n/a")])
    def test_from_dict_parses_numeric_strings(self, raw, expected):
        assert Status.from_dict({"error_code": raw}).error_code == expected

    @pytest.mark.parametrize("code, expected", [(None, False), (0, False), (1001, True), (500, True)])
    def test_is_error(self, code, expected):
        assert Status(error_code=code).is_error is expected


class TestUnwrapEnvelope:
    """Tests for the envelope decision table."""

    def test_flat(self, raw_status):
        data, status = unwrap_envelope({"data": [1, 2], "status": raw_status})

        assert data == [1, 2]
        assert status.elapsed == 10

    def test_nested(self, raw_status):
        data, status = unwrap_envelope({"data": {"data": {"id": 1}, "status": raw_status}})

        assert data == {"id": 1}
        assert status.credit_count == 1

    def test_flat_payload_with_status_field(self, raw_status):
        """Test that a non-dict "status" inside the payload is not mistaken for an envelope."""
        payload = {"id": 42, "status": "ONGOING"}

        data, _ = unwrap_envelope({"data": payload, "status": raw_status})

        assert data == payload

    def test_flat_without_data(self, raw_status):
        body = {"status": raw_status, "plan": {}}

        data, status = unwrap_envelope(body)

        assert data is body
        assert status is not None

    def test_flat_with_null_data(self, raw_status):
        data, status = unwrap_envelope({"data": None, "status": raw_status})

        assert data is None
        assert status is not None

    @pytest.mark.parametrize("body", [{}, {"data": [1]}, [1, 2], "text", None, {"status": "ok"}])
    def test_malformed(self, body):
        data, status = unwrap_envelope(body)

        assert status is None
        assert data == body

    def test_nested_without_inner_data(self, raw_status):
        """Test that the inner object is returned when it has no "data" key."""
        inner = {"status": raw_status, "id": 7}

        data, status = unwrap_envelope({"data": inner})

        assert data is inner
        assert status.credit_count == 1

    def test_nested_string_error_code(self):
        """Test that DexScan's textual status numbers are parsed."""
        body = {"data": {"data": None, "status": {"error_code": "1002", "error_message": "API key missing.",
                                                  "credit_count": "0", "elapsed": "3"}}}

        _, status = unwrap_envelope(body)

        assert status.error_code == 1002
        assert status.credit_count == 0
        assert status.elapsed == 3
        assert status.is_error
