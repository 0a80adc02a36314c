import pytest

from nescore.labels import Labels


def test_labels_from_file(tmp_path):
    path = tmp_path / "labels.fns"
    path.write_text(
        "StartLabel=0x8000\n"
        "MainLoop=0x8010\n"
        "# This is a comment\n"
        "\n"
        "EndLabel=FFFF\n"
    )
    labels = Labels.from_file(path)
    assert labels.get(0x8000) == "StartLabel"
    assert labels.get(0x8010) == "MainLoop"
    assert labels.get(0xFFFF) == "EndLabel"
    assert labels.get(0x1234) is None


def test_labels_compatibility():
    labels = Labels([(0x3F0, "SomeLabel"), (0x8045, "SomeBranch")])
    assert labels.get(0x3F0) == "SomeLabel"
    assert labels.get(0x8045) == "SomeBranch"


def test_dollar_prefix_and_whitespace(tmp_path):
    path = tmp_path / "labels.fns"
    path.write_text("  PpuCtrl = $2000  \n")
    labels = Labels.from_file(path)
    assert labels[0x2000] == "PpuCtrl"


def test_unparseable_addresses_are_skipped(tmp_path):
    path = tmp_path / "labels.fns"
    path.write_text("Bad=0xZZ\nTooBig=0x10000\nNoEquals\nGood=0x10\n")
    labels = Labels.from_file(path)
    assert len(labels) == 1
    assert labels.get(0x10) == "Good"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Labels.from_file(tmp_path / "nope.fns")


def test_insert_returns_previous():
    labels = Labels()
    assert labels.insert(0x2000, "First") is None
    assert labels.insert(0x2000, "Second") == "First"
    assert labels[0x2000] == "Second"


def test_mapping_protocol():
    labels = Labels({0x10: "A", 0x20: "B"})
    assert 0x10 in labels
    assert 0x30 not in labels
    assert sorted(labels) == [0x10, 0x20]
    assert dict(labels.items()) == {0x10: "A", 0x20: "B"}
    with pytest.raises(KeyError):
        labels[0x30]