"""Tests for lexicon aggregation."""

import threading
import time
import pytest
from unittest.mock import patch

from lexisent.analyser.lexicon.fingerprint import fingerprint
from lexisent.analyser.lexicon.lexicon_loader import (
    LexiconAccumulator,
    load_lexicons,
    resolve_lexicon_files
)
from lexisent.analyser.utils.error_handling import BatchTimeoutError, PathError


class TestLexiconAccumulator:
    """Test LexiconAccumulator merge semantics."""

    def test_sums_on_collision(self):
        accumulator = LexiconAccumulator()
        accumulator.merge({1: 1.0, 2: -0.5})
        accumulator.merge({1: 1.0, 3: 2.0})

        combined = accumulator.snapshot()

        assert combined[1] == 2.0
        assert combined[2] == -0.5
        assert combined[3] == 2.0
        assert accumulator.files_merged == 2

    def test_snapshot_is_read_only(self):
        accumulator = LexiconAccumulator()
        accumulator.merge({1: 1.0})

        combined = accumulator.snapshot()

        with pytest.raises(TypeError):
            combined[1] = 5.0

    def test_snapshot_unaffected_by_later_merges(self):
        accumulator = LexiconAccumulator()
        accumulator.merge({1: 1.0})
        combined = accumulator.snapshot()

        accumulator.merge({1: 1.0})

        assert combined[1] == 1.0

    def test_concurrent_merges_are_not_lost(self):
        """Merges from many threads all land in the combined table."""
        accumulator = LexiconAccumulator()
        threads = [
            threading.Thread(target=accumulator.merge, args=({7: 1.0},))
            for _ in range(50)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert accumulator.snapshot()[7] == 50.0


class TestResolveLexiconFiles:
    """Test resolve_lexicon_files function."""

    def test_single_file(self, write_file):
        path = write_file("one.txt", "good,1.0\n")
        assert resolve_lexicon_files(path) == [path]

    def test_single_file_any_extension(self, write_file):
        """An explicitly named file is used whatever its extension."""
        path = write_file("lexicon.dat", "good,1.0\n")
        assert resolve_lexicon_files(path) == [path]

    def test_directory_filters_by_extension(self, lexicon_dir):
        files = resolve_lexicon_files(lexicon_dir)
        assert [f.name for f in files] == ["negative.txt", "positive.txt"]

    def test_missing_path_raises(self, tmp_path):
        with pytest.raises(PathError, match="does not exist"):
            resolve_lexicon_files(tmp_path / "nowhere")

    def test_empty_path_raises(self):
        with pytest.raises(PathError):
            resolve_lexicon_files("")
        with pytest.raises(PathError):
            resolve_lexicon_files(None)


class TestLoadLexicons:
    """Test load_lexicons function."""

    def test_sums_duplicates_across_files(self, write_file, tmp_path):
        """ok,1.0 in two files combines to 2.0."""
        write_file("lex/a.txt", "ok,1.0\n")
        write_file("lex/b.txt", "ok,1.0\n")

        lexicon, warnings = load_lexicons(tmp_path / "lex")

        assert lexicon[fingerprint("ok")] == 2.0
        assert warnings == []

    def test_last_write_wins_within_file(self, write_file):
        """ok,1.0 twice in one file stays 1.0."""
        path = write_file("lex.txt", "ok,1.0\nok,1.0\n")

        lexicon, warnings = load_lexicons(path)

        assert lexicon[fingerprint("ok")] == 1.0
        assert warnings == []

    def test_bare_word_lines_do_not_drop_file(self, write_file):
        """Lines like word, are skipped and the rest of the file still loads."""
        path = write_file("lex.txt", "happy,2.0\nword,\ngood,1.0,\n")

        lexicon, warnings = load_lexicons(path)

        assert lexicon[fingerprint("happy")] == 2.0
        assert lexicon[fingerprint("good")] == 1.0
        assert fingerprint("word") not in lexicon
        assert warnings == []

    def test_loads_directory(self, lexicon_dir):
        lexicon, warnings = load_lexicons(lexicon_dir)

        assert lexicon[fingerprint("good")] == 1.0
        assert lexicon[fingerprint("sad")] == -0.5
        assert lexicon[fingerprint("ok")] == 2.0
        # notes.md is not a recognized lexicon file
        assert fingerprint("ignored") not in lexicon
        assert warnings == []

    def test_empty_directory(self, tmp_path):
        """A directory with no lexicon files yields an empty lexicon and no error."""
        empty = tmp_path / "empty"
        empty.mkdir()

        lexicon, warnings = load_lexicons(empty)

        assert len(lexicon) == 0
        assert warnings == []

    def test_invalid_path_returns_empty(self, tmp_path):
        """An invalid path is logged, never raised."""
        lexicon, warnings = load_lexicons(tmp_path / "missing")

        assert len(lexicon) == 0
        assert warnings == []

    def test_parse_error_isolated_to_file(self, write_file, tmp_path):
        """A bad file becomes a warning; other files still load."""
        write_file("lex/good.txt", "good,1.0\nok,1.0\n")
        write_file("lex/broken.txt", "ok,1.0\nbad,not-a-number\n")

        lexicon, warnings = load_lexicons(tmp_path / "lex")

        assert lexicon[fingerprint("good")] == 1.0
        # broken.txt's partial table is discarded entirely
        assert lexicon[fingerprint("ok")] == 1.0
        assert fingerprint("bad") not in lexicon
        assert len(warnings) == 1
        assert "broken.txt" in warnings[0]
        assert "bad,not-a-number" in warnings[0]

    def test_many_files(self, write_file, tmp_path):
        """Hundreds of files load concurrently into one table."""
        for i in range(200):
            write_file(f"lex/part_{i:03d}.txt", f"word{i},1.0\ncommon,0.5\n")

        lexicon, warnings = load_lexicons(tmp_path / "lex", max_workers=8)

        assert len(lexicon) == 201
        assert lexicon[fingerprint("common")] == pytest.approx(100.0)
        assert warnings == []

    def test_timeout_raises_without_partial_lexicon(self, lexicon_dir):
        """Exceeding the bounded wait is fatal."""
        def slow_parse(file_path):
            time.sleep(0.5)
            return {}

        with patch('lexisent.analyser.lexicon.lexicon_loader.parse_lexicon_file', side_effect=slow_parse):
            with pytest.raises(BatchTimeoutError) as exc_info:
                load_lexicons(lexicon_dir, timeout=0.05)

        assert isinstance(exc_info.value, TimeoutError)
        assert exc_info.value.pending >= 1
