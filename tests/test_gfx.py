import logging

import pytest

from squaregame.gfx import GFX, Option, resolve_option


def _gfx(**fields):
    return GFX(resolution=(800, 600), video_modes=[], **fields)


def test_resolve_known_and_unknown_names():
    assert resolve_option("title") is Option.TITLE
    assert resolve_option("framerate") is Option.FRAMERATE
    assert resolve_option("colour_depth") is Option.UNKNOWN


def test_save_writes_key_value_lines(tmp_path):
    path = tmp_path / "gfx.ini"
    _gfx(title="Demo", fullscreen=True, vsync=False, framerate=75).save(path)
    assert path.read_text(encoding="utf-8").splitlines() == [
        "title=Demo",
        "resolution_width=800",
        "resolution_height=600",
        "fullscreen=1",
        "vsync=0",
        "framerate=75",
    ]


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "gfx.ini"
    original = GFX(
        title="Square Game",
        resolution=(1280, 720),
        video_modes=[],
        fullscreen=True,
        vsync=True,
        framerate=144,
    )
    original.save(path)
    restored = _gfx()
    restored.load(path)
    assert restored == original


def test_load_reads_each_field(tmp_path):
    path = tmp_path / "gfx.ini"
    path.write_text(
        "title=Square Game\nresolution_width=1024\nresolution_height=768\n"
        "fullscreen=1\nvsync=0\nframerate=30\n",
        encoding="utf-8",
    )
    gfx = _gfx(vsync=True)
    gfx.load(path)
    assert gfx.title == "Square Game"
    assert gfx.resolution == (1024, 768)
    assert gfx.fullscreen is True
    assert gfx.vsync is False
    assert gfx.framerate == 30


def test_numbers_with_trailing_text_keep_leading_digits(tmp_path):
    path = tmp_path / "gfx.ini"
    path.write_text("framerate= 90fps\n", encoding="utf-8")
    gfx = _gfx()
    gfx.load(path)
    assert gfx.framerate == 90


def test_non_numeric_value_raises(tmp_path):
    path = tmp_path / "gfx.ini"
    path.write_text("framerate=fast\n", encoding="utf-8")
    with pytest.raises(ValueError):
        _gfx().load(path)


def test_unknown_keys_are_skipped(tmp_path, caplog):
    path = tmp_path / "gfx.ini"
    path.write_text("gamma=2\nframerate=120\n", encoding="utf-8")
    gfx = _gfx()
    with caplog.at_level(logging.WARNING, logger="squaregame.gfx"):
        gfx.load(path)
    assert gfx.framerate == 120
    assert "Unable to parse: gamma" in caplog.text


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        _gfx().load(tmp_path / "absent.ini")