import pytest

from citemark import CitationMarker, InvalidSourceError, Source
from citemark.config import load_annotation_job


def test_load_annotation_job(tmp_path):
    yaml_text = """
text: "The cat sat."
sources:
  - citationNumber: 1
    citationMarkers:
      - endOffset: 9
log_level: DEBUG
channel: web
"""
    cfg_path = tmp_path / "job.yaml"
    cfg_path.write_text(yaml_text)
    job = load_annotation_job(cfg_path)
    assert job.text == "The cat sat."
    assert job.sources == [Source(1, [CitationMarker(9)])]
    assert job.log_level == "DEBUG"
    assert job.log_file is None
    assert job.extra == {"channel": "web"}


def test_text_file_is_relative_to_config(tmp_path):
    (tmp_path / "answer.txt").write_text("Cats purr.", encoding="utf-8")
    cfg_path = tmp_path / "job.yaml"
    cfg_path.write_text("text_file: answer.txt\nsources: []\n")
    job = load_annotation_job(cfg_path)
    assert job.text == "Cats purr."
    assert job.sources == []


def test_missing_text_raises(tmp_path):
    cfg_path = tmp_path / "job.yaml"
    cfg_path.write_text("sources: []\n")
    with pytest.raises(InvalidSourceError, match="'text' or 'text_file'"):
        load_annotation_job(cfg_path)


def test_missing_sources_raises(tmp_path):
    cfg_path = tmp_path / "job.yaml"
    cfg_path.write_text("text: hello\n")
    with pytest.raises(InvalidSourceError, match="'sources' is required"):
        load_annotation_job(cfg_path)
