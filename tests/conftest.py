"""Shared test fixtures for pyyaip."""

import os
import tempfile

import pytest

from pyyaip import IniDocument


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def doc():
    return IniDocument()


@pytest.fixture
def sample_ini(tmp_dir):
    """Write a small INI file with comments and loose pairs."""
    path = os.path.join(tmp_dir, "sample.ini")
    with open(path, "w", encoding="utf-8") as f:
        f.write(
            "; leading comment\n"
            "Loose=pair\n"
            "\n"
            "[Video]  ; display settings\n"
            "Width = 1920\n"
            "Height=1080 ;\n"
            "Fullscreen=true\n"
            "\n"
            "[Empty]\n"
            "\n"
            "[audio]\n"
            "Volume=0.75\n"
        )
    return path
