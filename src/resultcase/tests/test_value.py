"""Tests for the plain tagged result value."""

from __future__ import annotations

import dataclasses

import pytest

from resultcase.monads.value import ERR, OK, ResultValue, failure, success


def test_success_wraps_under_ok_tag() -> None:
    r = success(5)
    assert r.tag == OK == "ok"
    assert r.inner == 5


def test_failure_wraps_under_err_tag() -> None:
    r = failure("boom")
    assert r.tag == ERR == "err"
    assert r.inner == "boom"


def test_none_payloads_are_valid() -> None:
    assert success(None).tag == "ok"
    assert failure(None).tag == "err"


def test_equality_uses_tag_and_payload() -> None:
    assert success(1) == success(1)
    assert failure("e") == failure("e")
    assert success(1) != success(2)
    assert success("x") != failure("x")


def test_hashable_with_hashable_payload() -> None:
    assert len({success(1), success(1), failure(1)}) == 2


def test_immutable() -> None:
    r = success(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.inner = 2  # type: ignore[misc]


def test_rejects_unknown_tag() -> None:
    with pytest.raises(ValueError, match="must be 'ok' or 'err'"):
        ResultValue("maybe", 1)  # type: ignore[arg-type]


def test_to_dict_uses_uniform_inner_field() -> None:
    assert success([1, 2]).to_dict() == {"tag": "ok", "inner": [1, 2]}
    assert failure("e").to_dict() == {"tag": "err", "inner": "e"}


def test_asdict_matches_wire_shape() -> None:
    assert dataclasses.asdict(success(3)) == {"tag": "ok", "inner": 3}


def test_repr() -> None:
    assert repr(success(5)) == "ResultValue(tag='ok', inner=5)"
