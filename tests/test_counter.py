"""Tests for counter.py - the counting pipeline."""

from pathlib import Path

import pytest

import sloc.counter as counter_module
from sloc.config import SlocConfig
from sloc.counter import PARALLEL_MIN_FILES, count_file, count_files, count_paths
from sloc.exceptions import FileAccessError
from sloc.stats import StatsAggregator


class TestCountFile:
    """Test count_file."""

    def test_counts_under_every_matching_language(self, source_tree: Path):
        agg = StatsAggregator()
        assert count_file(source_tree / "main_test.go", agg) == 2
        assert agg.get("Go").as_dict() == agg.get("GoTest").as_dict()
        assert agg.get("GoTest").as_dict() == {
            "files": 1,
            "code": 2,
            "comment": 1,
            "blank": 0,
            "total": 3,
        }

    def test_unrecognised_file_skipped(self, source_tree: Path):
        agg = StatsAggregator()
        assert count_file(source_tree / "image.png", agg) == 0
        assert agg.is_empty()

    def test_unreadable_file_raises_but_keeps_bucket(self, tmp_path: Path):
        agg = StatsAggregator()
        missing = tmp_path / "gone.c"
        with pytest.raises(FileAccessError):
            count_file(missing, agg)
        assert agg.get("C").files == 0


class TestCountPaths:
    """Test count_paths end to end."""

    def test_source_tree_totals(self, source_tree: Path):
        result = count_paths([source_tree])
        stats = result.stats
        assert result.errors == []
        assert stats.languages() == ["Go", "GoTest", "Markdown", "Python"]
        assert stats.get("Go").as_dict() == {
            "files": 2,
            "code": 5,
            "comment": 2,
            "blank": 1,
            "total": 8,
        }
        assert stats.get("Python").as_dict() == {
            "files": 1,
            "code": 2,
            "comment": 1,
            "blank": 1,
            "total": 4,
        }
        assert stats.get("Markdown").code == 1

    def test_every_bucket_partitions(self, source_tree: Path):
        result = count_paths([source_tree])
        for name in result.stats.languages():
            assert result.stats.get(name).counts.is_consistent()
        assert result.stats.total().counts.is_consistent()

    def test_row_order(self, source_tree: Path):
        rows = count_paths([source_tree]).stats.rows()
        assert [r.name for r in rows] == ["Total", "Go", "Python", "GoTest", "Markdown"]
        assert rows[0].files == 5
        assert rows[0].total == 17

    def test_read_error_does_not_abort(self, source_tree: Path, monkeypatch):
        real_read = counter_module.read_file_bytes
        broken = source_tree / "main.go"

        def fake_read(path):
            if path == broken:
                raise FileAccessError(path, "Permission denied")
            return real_read(path)

        monkeypatch.setattr(counter_module, "read_file_bytes", fake_read)
        result = count_paths([source_tree])

        assert [e.filepath for e in result.errors] == [broken]
        assert result.stats.get("Go").files == 1
        assert result.stats.get("Python").files == 1

    def test_missing_path_reported(self, source_tree: Path, tmp_path: Path):
        result = count_paths([tmp_path / "missing", source_tree])
        assert len(result.errors) == 1
        assert result.stats.get("Go").files == 2

    def test_same_file_twice_counts_twice(self, source_tree: Path):
        result = count_paths([source_tree / "main.go", source_tree / "main.go"])
        assert result.stats.get("Go").files == 2

    def test_repeated_root_counts_twice(self, tmp_path: Path):
        (tmp_path / "a.c").write_bytes(b"int x;\n")
        result = count_paths([tmp_path, tmp_path])
        assert result.stats.get("C").files == 2
        assert result.stats.get("C").code == 2

    def test_nested_root_counts_twice(self, tmp_path: Path):
        sub = tmp_path / "sub"
        sub.mkdir()
        (sub / "a.c").write_bytes(b"int x;\n")
        result = count_paths([tmp_path, sub])
        assert result.stats.get("C").files == 2

    def test_symlinked_file_counted(self, tmp_path: Path):
        (tmp_path / "real.c").write_bytes(b"int x;\n")
        src = tmp_path / "src"
        src.mkdir()
        (src / "a.c").write_bytes(b"int y;\n")
        (src / "link.c").symlink_to(Path("..") / "real.c")
        result = count_paths([src])
        assert result.stats.get("C").files == 2


class TestParallelCounting:
    """Test that worker count does not change results."""

    @pytest.fixture
    def many_files(self, tmp_path: Path) -> list[Path]:
        files = []
        for i in range(PARALLEL_MIN_FILES + 8):
            path = tmp_path / f"f{i:03d}.c"
            path.write_bytes(b"/* header\n */\nint x%d;\n\n// end\n" % i)
            files.append(path)
        return files

    def test_parallel_matches_sequential(self, many_files):
        sequential = StatsAggregator()
        parallel = StatsAggregator()
        assert count_files(many_files, sequential, workers=1) == []
        assert count_files(many_files, parallel, workers=4) == []
        assert sequential.get("C").as_dict() == parallel.get("C").as_dict()
        assert parallel.get("C").files == len(many_files)
        assert parallel.get("C").code == 2 * len(many_files)

    def test_parallel_errors_sorted(self, many_files, monkeypatch):
        doomed = {many_files[3], many_files[1]}

        def fake_read(path):
            if path in doomed:
                raise FileAccessError(path, "boom")
            return path.read_bytes()

        monkeypatch.setattr(counter_module, "read_file_bytes", fake_read)
        errors = count_files(many_files, StatsAggregator(), workers=4)
        assert [e.filepath for e in errors] == sorted(doomed)

    def test_count_paths_uses_config_workers(self, tmp_path: Path, many_files):
        result = count_paths([tmp_path], SlocConfig(workers=2))
        assert result.files_seen == len(many_files)
        assert result.stats.get("C").files == len(many_files)

    @pytest.mark.slow
    def test_large_tree_parallel_matches_sequential(self, tmp_path: Path):
        for d in range(40):
            pkg = tmp_path / f"pkg{d:02d}"
            pkg.mkdir()
            for i in range(100):
                (pkg / f"m{i:03d}.py").write_bytes(b'"""doc\n"""\nx = 1\n\n# note\n')
                (pkg / f"m{i:03d}.go").write_bytes(b"package p\n/* a\n b */\nvar x = 1\n")

        sequential = count_paths([tmp_path], SlocConfig(workers=1))
        parallel = count_paths([tmp_path], SlocConfig(workers=8))

        assert parallel.files_seen == sequential.files_seen == 8000
        assert [r.as_dict() for r in parallel.stats.rows()] == [
            r.as_dict() for r in sequential.stats.rows()
        ]
        assert parallel.stats.get("Python").files == 4000
