"""Tests for the command-line interface."""

import argparse

import pytest

from projectgallery.cli import main, parse_tag_order


def test_gallery_command(sample_path, tmp_path, capsys):
    out_dir = tmp_path / "site"
    main(["gallery", "--data", str(sample_path), "--output-dir", str(out_dir)])
    assert (out_dir / "gallery.html").exists()
    assert "Done!" in capsys.readouterr().out


def test_list_command(sample_path, capsys):
    main(["list", "--data", str(sample_path)])
    out = capsys.readouterr().out.splitlines()
    assert out == ["  B  (2025)", "  A  (2024)", "Showing: 2/2"]


def test_list_command_with_tags(studio_document, write_document, capsys):
    path = write_document(studio_document)
    main(["list", "--data", str(path), "--tag", "Sound", "--tag", "XR"])
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "Showing: 3/4"
    assert out[0] == "  Lumen Field  (2025; Light, Sound)"


def test_tags_command(studio_document, write_document, capsys):
    path = write_document(studio_document)
    main(["tags", "--data", str(path), "--tag", "Light", "--tag-order", "Light,XR,Screens"])
    assert capsys.readouterr().out.splitlines() == ["  Light *", "  XR"]


def test_missing_data_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["list", "--data", str(tmp_path / "nope.json")])
    assert exc.value.code == 1
    assert "Data file not found" in capsys.readouterr().err


def test_list_fallback_message_exits(write_document, capsys):
    path = write_document({})
    with pytest.raises(SystemExit):
        main(["list", "--data", str(path)])
    assert "No projects found." in capsys.readouterr().out


def test_parse_tag_order():
    assert parse_tag_order("XR, Light") == ("XR", "Light")
    with pytest.raises(argparse.ArgumentTypeError):
        parse_tag_order(" , ")
