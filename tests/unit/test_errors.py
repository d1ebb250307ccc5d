from __future__ import annotations

import pytest

from response_signal.core.errors import (
    ERROR_DOMAIN,
    DataError,
    ImageMappingError,
    JSONMappingError,
    MappingError,
    MappingErrorKind,
    ResponseSignalError,
    StatusCodeError,
    StringMappingError,
    build_mapping_error,
)


def test_error_kind_codes_are_stable():
    assert MappingErrorKind.IMAGE_MAPPING == 0
    assert MappingErrorKind.JSON_MAPPING == 1
    assert MappingErrorKind.STRING_MAPPING == 2
    assert MappingErrorKind.STATUS_CODE == 3
    assert MappingErrorKind.DATA == 4


@pytest.mark.parametrize(
    ("kind", "expected_type"),
    [
        (MappingErrorKind.IMAGE_MAPPING, ImageMappingError),
        (MappingErrorKind.JSON_MAPPING, JSONMappingError),
        (MappingErrorKind.STRING_MAPPING, StringMappingError),
        (MappingErrorKind.STATUS_CODE, StatusCodeError),
        (MappingErrorKind.DATA, DataError),
    ],
    ids=["image", "json", "string", "status", "data"],
)
def test_build_mapping_error_selects_subclass(kind, expected_type):
    err = build_mapping_error(kind, data="payload")
    assert isinstance(err, expected_type)
    assert isinstance(err, MappingError)
    assert isinstance(err, ResponseSignalError)
    assert err.kind is kind
    assert err.code == int(kind)
    assert err.domain == ERROR_DOMAIN


def test_context_carries_data_when_present():
    err = build_mapping_error(MappingErrorKind.DATA, data=42)
    assert err.data == 42
    assert err.context == {"data": 42}


def test_context_is_empty_when_data_absent():
    err = build_mapping_error(MappingErrorKind.JSON_MAPPING)
    assert err.data is None
    assert err.context == {}


def test_build_mapping_error_keeps_explicit_message_and_decoder_error():
    decoder_error = ValueError("bad byte")
    err = build_mapping_error(
        MappingErrorKind.STRING_MAPPING,
        message="custom",
        decoder_error=decoder_error,
    )
    assert str(err) == "custom"
    assert err.decoder_error is decoder_error


def test_build_mapping_error_uses_default_message():
    err = build_mapping_error(MappingErrorKind.IMAGE_MAPPING)
    assert str(err) == "failed to map response data to an image"


def test_build_mapping_error_accepts_raw_int_kind():
    err = build_mapping_error(3)  # type: ignore[arg-type]
    assert isinstance(err, StatusCodeError)
