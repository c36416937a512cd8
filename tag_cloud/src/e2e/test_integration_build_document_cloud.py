from pathlib import Path
import pytest

from tagcloud import Engine, TagCountError, build_cloud


def _seed(tmp: Path, text: str = "the cat sat on the mat the cat ran\n") -> str:
    doc = tmp / "doc.txt"
    doc.write_text(text, encoding="utf-8")
    return str(doc)


@pytest.mark.e2e
def test_load_and_build_cloud(tmp_path: Path):
    path = _seed(tmp_path)
    eng = Engine()
    try:
        eng.load(path)
        assert (eng.distinct_words, eng.total_words) == (6, 9)
        cloud = eng.cloud(3)
        assert [(e.word, e.count, e.font_size) for e in cloud.entries] == [
            ("cat", 2, 29), ("mat", 1, 11), ("the", 3, 48),
        ]
        assert (cloud.min_count, cloud.max_count) == (1, 3)
        assert cloud.source == "doc.txt"
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_several_clouds_from_one_table(tmp_path: Path):
    eng = Engine()
    eng.load(_seed(tmp_path, "a a a a b b c\n"))
    # scaling depends on the selected words only
    two = {e.word: e.font_size for e in eng.cloud(2).entries}
    three = {e.word: e.font_size for e in eng.cloud(3).entries}
    assert two == {"a": 48, "b": 11}
    assert three == {"a": 48, "b": 23, "c": 11}
    eng.shutdown()


@pytest.mark.e2e
def test_single_word_cloud_does_not_crash():
    cloud = build_cloud("the cat sat on the mat the cat ran", 1)
    assert [(e.word, e.font_size) for e in cloud.entries] == [("the", 11)]


@pytest.mark.e2e
def test_flat_distribution_gets_one_size():
    cloud = build_cloud("one two three four", 4)
    assert {e.font_size for e in cloud.entries} == {11}


@pytest.mark.e2e
def test_empty_document_rejects_every_n(tmp_path: Path):
    eng = Engine()
    eng.load(_seed(tmp_path, "  123 -- ...\n"))
    assert eng.distinct_words == 0
    with pytest.raises(TagCountError):
        eng.cloud(1)


@pytest.mark.e2e
def test_cloud_before_build_and_missing_file(tmp_path: Path):
    eng = Engine()
    with pytest.raises(RuntimeError):
        eng.cloud(1)
    with pytest.raises(FileNotFoundError):
        eng.load(str(tmp_path / "nope.txt"))


@pytest.mark.e2e
def test_custom_separators():
    cloud = build_cloud("x1y x1y z", 2, separators=set(" "))
    assert [(e.word, e.count) for e in cloud.entries] == [("x1y", 2), ("z", 1)]
