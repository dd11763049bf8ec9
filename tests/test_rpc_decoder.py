from typing import Any

import pytest
from pydantic import BaseModel

from viabtc_rpc.rpc.decoder import decode_response
from viabtc_rpc.utils.exceptions import DecodeError


class AssetBalance(BaseModel):
    available: str
    freeze: str


def test_decode_success_envelope_with_typed_result() -> None:
    body = b'{"error": null, "result": {"BTC": {"available": "1.5", "freeze": "0"}}, "id": 1}'
    resp = decode_response(body, dict[str, AssetBalance])
    assert resp.error is None
    assert resp.result == {"BTC": AssetBalance(available="1.5", freeze="0")}


def test_decode_defaults_to_untyped_result() -> None:
    resp = decode_response(b'{"error": null, "result": [1, "a"]}')
    assert resp.result == [1, "a"]


def test_decode_error_envelope_skips_result_validation() -> None:
    body = b'{"error": {"code": 10, "message": "order not found"}, "result": null}'
    resp = decode_response(body, AssetBalance)
    assert resp.result is None
    assert resp.error is not None
    assert resp.error.code == 10
    assert resp.error.message == "order not found"


def test_invalid_json_raises_decode_error() -> None:
    with pytest.raises(DecodeError) as err:
        decode_response(b"<html>oops</html>", Any, status_code=500)
    assert err.value.code == "DECODE_ERROR"
    assert err.value.details == {"status_code": 500}


def test_non_utf8_body_raises_decode_error() -> None:
    with pytest.raises(DecodeError):
        decode_response(b"\xff\xfe\x00", Any)


def test_non_object_envelope_raises_decode_error() -> None:
    with pytest.raises(DecodeError) as err:
        decode_response(b'["error", "result"]', Any)
    assert "must be an object" in err.value.message


def test_malformed_error_field_raises_decode_error() -> None:
    with pytest.raises(DecodeError):
        decode_response(b'{"error": {"code": "not-a-number"}, "result": null}', Any)


def test_result_shape_mismatch_raises_decode_error() -> None:
    with pytest.raises(DecodeError) as err:
        decode_response(b'{"error": null, "result": {"unexpected": true}}', AssetBalance)
    assert "expected shape" in err.value.message


def test_missing_result_is_not_silently_defaulted() -> None:
    with pytest.raises(DecodeError):
        decode_response(b'{"error": null}', AssetBalance)
    assert decode_response(b'{"error": null}', AssetBalance | None).result is None


def test_deeply_nested_body_raises_decode_error() -> None:
    content = b'{"error": null, "result": ' + b"[" * 200000 + b"}"
    with pytest.raises(DecodeError) as err:
        decode_response(content, Any, status_code=200)
    assert "nests too deeply" in err.value.message
    assert err.value.details == {"status_code": 200}
