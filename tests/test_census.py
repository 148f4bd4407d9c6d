import os

import pytest

from conftest import write_file
from tree_census.census import CensusConfig, run_census, validate_roots
from tree_census.errors import ConfigurationError


def test_validate_roots_drops_invalid(tmp_path, caplog):
    write_file(tmp_path / "file.txt", 1)
    roots = validate_roots([str(tmp_path), str(tmp_path / "missing"), str(tmp_path / "file.txt")])
    assert roots == [str(tmp_path)]
    assert "missing" in caplog.text
    assert "file.txt" in caplog.text


def test_validate_roots_none_left(tmp_path):
    with pytest.raises(ConfigurationError):
        validate_roots([str(tmp_path / "missing")])


def test_bad_pattern_aborts_before_traversal(simple_tree, monkeypatch):
    def fail(*_args, **_kwargs):
        raise AssertionError("Scan darf nicht starten")

    monkeypatch.setattr(os, "scandir", fail)
    with pytest.raises(ConfigurationError):
        run_census(CensusConfig(roots=[str(simple_tree)], pattern="(["))


@pytest.mark.parametrize("non_recursive", [True, False])
def test_modes_agree(wide_tree, simple_tree, non_recursive):
    config = CensusConfig(
        roots=[str(wide_tree), str(simple_tree)],
        with_size=True,
        non_recursive=non_recursive,
        threads=4,
    )
    counters = run_census(config)
    assert [(c.n_files, c.n_dirs) for c in counters] == [(500, 50), (3, 1)]


def test_sequential_drops_unreadable_root_only(tmp_path, simple_tree, monkeypatch):
    bad = tmp_path / "bad"
    bad.mkdir()
    real_scandir = os.scandir

    def scandir(path="."):
        if os.fspath(path) == str(bad):
            raise PermissionError(13, "Permission denied", str(bad))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", scandir)
    counters = run_census(CensusConfig(roots=[str(bad), str(simple_tree)], non_recursive=True))
    assert [c.dirpath for c in counters] == [str(simple_tree)]


def test_order_by_size_forces_size(simple_tree):
    config = CensusConfig(roots=[str(simple_tree)], order_by="s")
    assert config.size_requested
    (counter,) = run_census(config)
    assert counter.total_size() > 0


def test_with_dir_only_without_pattern():
    assert CensusConfig().with_dir
    assert not CensusConfig(pattern="x").with_dir


def test_progress_bar_does_not_change_results(wide_tree):
    plain = run_census(CensusConfig(roots=[str(wide_tree)], with_size=True))
    shown = run_census(CensusConfig(roots=[str(wide_tree)], with_size=True, progress=True))
    assert (plain[0].n_files, plain[0].size) == (shown[0].n_files, shown[0].size)
