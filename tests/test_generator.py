"""Tests for the vendor-bound IDGenerator."""

import pytest

from open_id.codec import describe, generate, verify
from open_id.errors import InvalidFieldError
from open_id.generator import IDGenerator
from open_id.indicator import TypeIndicator


def test_new_uses_defaults() -> None:
    ids = IDGenerator("fid", indicator=TypeIndicator.LOG, location="USWST")
    description = describe(ids.new("TE", "ES"))
    assert description.indicator == "L"
    assert description.vendor == "FID"
    assert description.location == "USWST"


def test_new_overrides() -> None:
    ids = IDGenerator("FID", indicator=TypeIndicator.LOG, location="USWST")
    description = describe(ids.new("TE", indicator="N", location=""))
    assert description.indicator == "N"
    assert description.subtype == "TE"
    assert description.location == "MISCR"


def test_bad_vendor_raises() -> None:
    with pytest.raises(InvalidFieldError, match="vendor must be length 3"):
        IDGenerator("FIDO")


def test_vendor_growing_when_uppercased_raises() -> None:
    with pytest.raises(InvalidFieldError, match="vendor must be length 3"):
        IDGenerator("ßAB")


def test_bad_type_raises() -> None:
    with pytest.raises(InvalidFieldError, match="type"):
        IDGenerator("FID").new("T")


def test_signed_generator_verifies() -> None:
    ids = IDGenerator("FID", secret="secr3t")
    assert ids.signed is True
    fid = ids.new("TE")
    assert ids.verify(fid) is True
    assert verify(fid, "secr3t") is True


def test_owns() -> None:
    ids = IDGenerator("FID", secret="secr3t")
    assert ids.owns(ids.new("TE")) is True
    assert ids.owns(generate("E", "ABC", "TE", "", "", "secr3t")) is False
    assert ids.owns("not an id") is False


def test_owns_rejects_wrong_secret() -> None:
    ids = IDGenerator("FID", secret="secr3t")
    # A single hex checksum collides one time in sixteen
    foreign = [generate("E", "FID", "TE", "", "", "other") for _ in range(20)]
    assert not all(ids.owns(fid) for fid in foreign)


def test_unsigned_generator_owns_any_vendor_id() -> None:
    ids = IDGenerator("FID")
    assert ids.signed is False
    assert ids.owns(generate("E", "FID", "TE", "", "", "other")) is True


def test_from_env() -> None:
    ids = IDGenerator.from_env({
        "OPEN_ID_VENDOR": "FOR",
        "OPEN_ID_SECRET": "secr3t",
        "OPEN_ID_INDICATOR": "T",
        "OPEN_ID_LOCATION": "EUWST",
    })
    fid = ids.new("TE", "ST")
    description = describe(fid)
    assert description.vendor == "FOR"
    assert description.indicator == "T"
    assert description.location == "EUWST"
    assert verify(fid, "secr3t") is True


def test_from_env_reads_os_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPEN_ID_VENDOR", "ENV")
    monkeypatch.delenv("OPEN_ID_SECRET", raising=False)
    monkeypatch.delenv("OPEN_ID_INDICATOR", raising=False)
    monkeypatch.delenv("OPEN_ID_LOCATION", raising=False)
    ids = IDGenerator.from_env()
    assert ids.vendor == "ENV"
    assert ids.signed is False
    assert describe(ids.new("TE")).indicator == "E"


def test_from_env_missing_vendor_raises() -> None:
    with pytest.raises(InvalidFieldError):
        IDGenerator.from_env({})


def test_repr_hides_secret() -> None:
    ids = IDGenerator("FID", secret="hunter2")
    assert "hunter2" not in repr(ids)
    assert "signed=True" in repr(ids)
