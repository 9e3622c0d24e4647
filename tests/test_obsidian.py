import pytest

from thaumsolver.obsidian import NodeInfo, Obsidian

NETWORK_TEXT = (
    "3\n"
    "Aer Primal Aspect\n"
    "Terra Primal Aspect\n"
    "X Aer Terra\n"
    "Aer 4 4\n"
    "Terra 2 2\n"
    "X 1 2\n"
)


@pytest.fixture
def network_file(tmp_path):
    path = tmp_path / "network.txt"
    path.write_text(NETWORK_TEXT)
    return path


def test_load_file_recipes(network_file):
    ob = Obsidian(network_file, True)
    assert ob.nodes == {"Aer": ("", ""), "Terra": ("", ""), "X": ("Aer", "Terra")}


def test_load_file_counts(network_file):
    ob = Obsidian(network_file)
    assert ob.data["X"] == NodeInfo(1, 2)
    assert ob.data["Aer"] == NodeInfo(4, 4)


def test_file_round_trip(network_file, tmp_path):
    out = tmp_path / "copy.txt"
    Obsidian(network_file).file_output(out)
    assert out.read_text() == NETWORK_TEXT
    again = Obsidian(out)
    assert again.nodes == Obsidian(network_file).nodes
    assert again.data == Obsidian(network_file).data


def test_truncated_file_raises(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("2\nAer Primal Aspect\n")
    with pytest.raises(ValueError):
        Obsidian(path)


@pytest.fixture
def notes(tmp_path):
    folder = tmp_path / "notes"
    folder.mkdir()
    (folder / "Aer.md").write_text("")
    (folder / "Terra.md").write_text("")
    (folder / "X.md").write_text("[[Aer]]+[Terra]]\nmore text\n")
    (folder / "readme.txt").write_text("[[ignored]]")
    return folder


def test_load_folder(notes):
    ob = Obsidian(notes, False)
    assert ob.nodes == {"Aer": ("", ""), "Terra": ("", ""), "X": ("Aer", "Terra")}
    assert ob.data == {}


def test_folder_output_marks_primal(notes, tmp_path):
    out = tmp_path / "network.txt"
    Obsidian(notes, False).file_output(out)
    lines = out.read_text().splitlines()
    assert lines[0] == "3"
    assert "Aer Primal Aspect" in lines
    assert "X Aer Terra" in lines
    assert Obsidian(out).nodes == Obsidian(notes, False).nodes


def test_input_counts_keeps_max(network_file):
    ob = Obsidian(network_file)
    ob.input_counts(len)
    assert ob.data["Terra"] == NodeInfo(len("Terra"), 2)


def test_input_counts_asks_each_in_order(notes):
    ob = Obsidian(notes, False)
    asked = []
    ob.input_counts(lambda name: asked.append(name) or 7)
    assert asked == sorted(ob.nodes)
    assert all(info.count == 7 for info in ob.data.values())


def test_nodes_is_a_copy(network_file):
    ob = Obsidian(network_file)
    ob.nodes.clear()
    ob.data["X"].count = 99
    assert len(ob.nodes) == 3
    assert ob.data["X"].count == 1