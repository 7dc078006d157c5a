import logging

import pytest

from uule_converter import (InvalidBase64, InvalidPrefix, MissingField, UuleConverter, UuleSettings, Uulev1Data,
                            Uulev2Data)


def test_encode_coordinates(mountain_view_uule):
    uule = UuleConverter.encode(37.4210000, -12.2084000, radius=-1, role=1, producer=12, provenance=6,
                                timestamp=1591521249034000)

    assert uule == mountain_view_uule


def test_encode_uses_settings_for_missing_values():
    settings = UuleSettings(role=1, producer=12, provenance=6, radius=6200)

    uule = Uulev2Data.decode(UuleConverter.encode(32.7767, -96.7970, timestamp=1, settings=settings))

    assert uule == Uulev2Data(role=1, producer=12, provenance=6, timestamp=1,
                              lat=32.7767, long=-96.797, radius=6200)


def test_encode_reads_settings_from_environment(monkeypatch):
    monkeypatch.setenv("UULE_RADIUS", "620")

    uule = Uulev2Data.decode(UuleConverter.encode(32.7767, -96.7970))

    assert uule.radius == 620
    assert uule.provenance == 0


def test_encode_place(queens_uule):
    assert UuleConverter.encode_place("Queens County,New York,United States") == queens_uule


def test_decode_picks_version_by_prefix(queens_uule, mountain_view_uule, mountain_view):
    assert UuleConverter.decode(queens_uule) == Uulev1Data.new("Queens County,New York,United States")
    assert UuleConverter.decode(mountain_view_uule) == mountain_view


def test_decode_unknown_prefix():
    with pytest.raises(InvalidPrefix):
        UuleConverter.decode("b+CAIQICIk")


@pytest.mark.parametrize("uule", ["asdf", "w+@@@@", "a+cm9sZToxCg"])
def test_try_decode_logs_and_returns_none(caplog, uule):
    with caplog.at_level(logging.ERROR):
        assert UuleConverter.try_decode(uule) is None

    assert "try_decode" in caplog.text


def test_try_decode_valid(queens_uule):
    assert UuleConverter.try_decode(queens_uule) == Uulev1Data.new("Queens County,New York,United States")


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        UuleConverter.decode("w+@@@@")

    assert issubclass(InvalidPrefix, InvalidBase64)
    assert issubclass(MissingField, ValueError)


def test_encode_reads_env_file_from_working_directory(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("UULE_RADIUS=777\n")
    monkeypatch.chdir(tmp_path)

    uule = Uulev2Data.decode(UuleConverter.encode(1.0, 2.0, timestamp=1))

    assert uule.radius == 777
