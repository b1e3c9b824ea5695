"""Tests for JSON / YAML interchange."""

import json
import os

import pytest
import yaml

from pyyaip import IniDocument, IniJsonParser, IniParser, IniYamlParser


@pytest.fixture
def filled(doc):
    doc.set_value("", "Loose", "x")
    doc.set_value("Video", "Width", 1920)
    doc.set_value("Video", "Title", "Grüße")
    return doc


def test_json_round_trip(filled, tmp_dir):
    parser = IniJsonParser(os.path.join(tmp_dir, "doc.json"))
    parser.write(filled)
    with open(parser.filename, encoding="utf-8") as f:
        assert json.load(f) == {
            "": {"Loose": "x"},
            "Video": {"Title": "Grüße", "Width": "1920"},
        }
    assert parser.read().to_dict() == filled.to_dict()


def test_yaml_round_trip(filled, tmp_dir):
    parser = IniYamlParser(os.path.join(tmp_dir, "doc.yaml"))
    parser.write(filled)
    with open(parser.filename, encoding="utf-8") as f:
        assert yaml.safe_load(f)["Video"]["Width"] == "1920"
    assert parser.read().to_dict() == filled.to_dict()


def test_yaml_scalars_become_text(tmp_dir):
    path = os.path.join(tmp_dir, "typed.yaml")
    with open(path, "w", encoding="utf-8") as f:
        f.write("Debug: true\nVideo:\n  Width: 1920\n  Ratio: 1.5\n  Title:\nEmpty: {}\n")
    doc = IniYamlParser(path).read()
    assert doc.to_dict() == {
        "": {"Debug": "true"},
        "Video": {"Ratio": "1.5", "Title": "", "Width": "1920"},
    }
    assert doc.get_value("Video", "Width", 0) == 1920


def test_read_into_existing_document(doc, tmp_dir):
    path = os.path.join(tmp_dir, "doc.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump({"S": {"K": "v"}}, f)
    doc.set_value("Old", "K", "v")
    IniJsonParser(path).read(doc)
    assert doc.list_sections() == ["S"]


def test_json_root_must_be_object(tmp_dir):
    path = os.path.join(tmp_dir, "list.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(["a", "b"], f)
    with pytest.raises(ValueError):
        IniJsonParser(path).read()


def test_empty_yaml(tmp_dir):
    path = os.path.join(tmp_dir, "empty.yaml")
    open(path, "w").close()
    assert IniYamlParser(path).read().list_sections() == []


def test_saved_ini_matches_json(filled, tmp_dir):
    ini = os.path.join(tmp_dir, "doc.ini")
    IniParser(ini, "utf-8").write(filled)
    loaded = IniDocument(encoding="utf-8")
    assert loaded.load(ini)
    assert loaded.to_dict() == IniJsonParser.to_mapping(filled)
