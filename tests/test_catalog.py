from notepad.notes.catalog import FileCatalog


def test_refresh_excludes_meta_sidecars(notes_dir):
    for name in ("a.txt", "a.txt.meta", "b.txt"):
        (notes_dir / name).write_text("", encoding="utf-8")

    cat = FileCatalog(notes_dir)
    names = cat.refresh()

    assert sorted(names) == ["a.txt", "b.txt"]
    assert list(cat.names) == names


def test_refresh_skips_subdirectories(notes_dir):
    (notes_dir / "sub").mkdir()
    (notes_dir / "note.txt").write_text("x", encoding="utf-8")

    assert FileCatalog(notes_dir).refresh() == ["note.txt"]


def test_missing_directory_yields_empty_list(tmp_path):
    cat = FileCatalog(tmp_path / "nope")
    assert cat.refresh() == []
    assert len(cat) == 0


def test_index_of(notes_dir):
    (notes_dir / "only.txt").write_text("", encoding="utf-8")
    cat = FileCatalog(notes_dir)
    cat.refresh()

    assert cat.index_of("only.txt") == 0
    assert cat.index_of("missing.txt") == -1
    assert cat.index_of(None) == -1
    assert "only.txt" in cat


def test_refresh_rebuilds_wholesale(notes_dir):
    p = notes_dir / "gone.txt"
    p.write_text("", encoding="utf-8")
    cat = FileCatalog(notes_dir)
    cat.refresh()
    p.unlink()

    assert cat.refresh() == []
    assert cat.index_of("gone.txt") == -1
