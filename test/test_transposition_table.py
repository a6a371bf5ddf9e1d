"""
Transposition table read/write policy.
"""
import pytest

from ai.search import MemoEntry, TranspositionTable, is_definite_score


class TestDefiniteScore:

    @pytest.mark.parametrize("score", [1, -1])
    def test_decisive_scores(self, score):
        assert is_definite_score(score)
        assert is_definite_score(score, terminal=True)

    def test_zero_needs_a_finished_game(self):
        assert not is_definite_score(0)
        assert is_definite_score(0, terminal=True)

    @pytest.mark.parametrize("score", [2, -3, 9])
    def test_heuristic_scores(self, score):
        assert not is_definite_score(score)
        assert not is_definite_score(score, terminal=True)


class TestReadPolicy:

    def test_definite_entry_serves_deeper_query(self):
        tt = TranspositionTable()
        tt.put("k", 3, 1)
        entry = tt.lookup("k")
        assert entry == MemoEntry(3, 1, True)
        assert tt.stats["hits"] == 1

    def test_heuristic_entry_is_kept_but_not_served(self):
        tt = TranspositionTable()
        tt.put("k", 1, 2)
        assert tt.lookup("k") is None
        assert tt.get("k") == MemoEntry(1, 2, False)
        assert tt.stats["misses"] == 1

    def test_draw_served_only_on_terminal_state(self):
        tt = TranspositionTable()
        tt.put("k", 0, 0)
        assert tt.lookup("k") is None
        assert tt.lookup("k", terminal=True) == MemoEntry(0, 0, False)

    def test_explicit_flag_overrides_score_rule(self):
        tt = TranspositionTable()
        tt.put("k", 2, 1, definite=False)
        assert tt.lookup("k") is None

    def test_missing_key(self):
        tt = TranspositionTable()
        assert tt.lookup("nope") is None
        assert tt.get("nope") is None


class TestWritePolicy:

    def test_terminal_always_overwrites(self):
        tt = TranspositionTable()
        tt.put("k", 5, 1)
        tt.store_terminal("k", 7, 0)
        assert tt.get("k") == MemoEntry(7, 0, True)

    def test_cutoff_does_not_clobber_definite(self):
        tt = TranspositionTable()
        tt.store_terminal("k", 2, -1)
        tt.store_cutoff("k", 4, 3)
        assert tt.get("k") == MemoEntry(2, -1, True)
        assert tt.stats["skipped"] == 1

    def test_cutoff_replaces_heuristic(self):
        tt = TranspositionTable()
        tt.store_cutoff("k", 4, 3)
        tt.store_cutoff("k", 2, -2)
        assert tt.get("k") == MemoEntry(2, -2, False)

    def test_cutoff_one_is_not_definite(self):
        tt = TranspositionTable()
        tt.store_cutoff("k", 2, 1)
        assert tt.get("k").definite is False

    def test_expanded_new_key(self):
        tt = TranspositionTable()
        tt.store_expanded("k", 3, 2, definite=False)
        assert tt.get("k") == MemoEntry(3, 2, False)

    def test_expanded_definite_wins(self):
        tt = TranspositionTable()
        tt.store_expanded("k", 1, 4, definite=False)
        tt.store_expanded("k", 6, 0, definite=True)
        assert tt.get("k") == MemoEntry(6, 0, True)

    def test_expanded_deeper_or_equal_replaces_heuristic(self):
        tt = TranspositionTable()
        tt.store_expanded("k", 2, 4, definite=False)
        tt.store_expanded("k", 2, 3, definite=False)
        assert tt.get("k").score == 3
        tt.store_expanded("k", 5, 1, definite=False)
        assert tt.get("k") == MemoEntry(5, 1, False)

    def test_expanded_shallower_heuristic_is_skipped(self):
        tt = TranspositionTable()
        tt.store_expanded("k", 5, 4, definite=False)
        tt.store_expanded("k", 1, 2, definite=False)
        assert tt.get("k") == MemoEntry(5, 4, False)

    def test_expanded_never_downgrades_definite(self):
        tt = TranspositionTable()
        tt.store_expanded("k", 1, -1, definite=True)
        tt.store_expanded("k", 4, 2, definite=False)
        assert tt.get("k") == MemoEntry(1, -1, True)


class TestBulk:

    def test_update_accepts_tuples_and_dicts(self):
        tt = TranspositionTable()
        tt.update({
            "a": (1, 1),
            "b": (2, 0, True),
            "c": {"depth": 3, "score": 5},
            "d": MemoEntry(0, -1, True),
        })
        assert tt.get("a") == MemoEntry(1, 1, True)
        assert tt.get("b") == MemoEntry(2, 0, True)
        assert tt.get("c") == MemoEntry(3, 5, False)
        assert len(tt) == 4
        assert "d" in tt

    def test_merge_prefers_definite_then_depth(self):
        tt = TranspositionTable({
            "a": MemoEntry(1, 2, False),
            "b": MemoEntry(1, 1, True),
            "c": MemoEntry(4, 3, False),
        })
        other = TranspositionTable({
            "a": MemoEntry(0, 0, True),
            "b": MemoEntry(9, 5, False),
            "c": MemoEntry(2, 1, False),
            "d": MemoEntry(1, -1, True),
        })
        written = tt.merge(other)
        assert written == 2
        assert tt.get("a") == MemoEntry(0, 0, True)
        assert tt.get("b") == MemoEntry(1, 1, True)
        assert tt.get("c") == MemoEntry(4, 3, False)
        assert tt.get("d") == MemoEntry(1, -1, True)

    def test_snapshot_definite_only(self):
        tt = TranspositionTable({"a": MemoEntry(1, 1, True), "b": MemoEntry(1, 3, False)})
        assert set(tt.snapshot()) == {"a", "b"}
        assert set(tt.snapshot(definite_only=True)) == {"a"}

    def test_stats_and_clear(self):
        tt = TranspositionTable()
        tt.put("a", 0, 1)
        tt.lookup("a")
        tt.lookup("b")
        stats = tt.get_stats()
        assert stats["total_queries"] == 2
        assert stats["hit_rate"] == "50.00%"
        assert stats["definite_entries"] == 1

        tt.clear()
        assert len(tt) == 0
        assert tt.get_stats()["total_queries"] == 0
