"""
Config validation and the self-play command line.
"""
import pytest

import selfplay
from config import Config, SearchConfig, StorageConfig


class TestConfig:

    def test_defaults(self):
        config = Config()
        assert config.search.max_depth is None
        assert config.search.num_workers == 1
        assert config.storage.cache_file == "utt_cache_digest.json"
        assert config.storage.entries_per_chunk == 2000

    @pytest.mark.parametrize("kwargs", [
        {"max_depth": -1},
        {"print_depth": -2},
        {"num_workers": 0},
    ])
    def test_bad_search_config(self, kwargs):
        with pytest.raises(ValueError):
            SearchConfig(**kwargs)

    def test_bad_chunk_size(self):
        with pytest.raises(ValueError):
            StorageConfig(entries_per_chunk=0)


class TestArgs:

    def test_defaults(self):
        args = selfplay.parse_args([])
        assert args.max_depth is None
        assert args.x == "minimax"
        assert not args.no_cache

    def test_negative_depth_rejected(self):
        with pytest.raises(SystemExit):
            selfplay.parse_args(["--max-depth", "-1"])

    def test_build_config(self):
        args = selfplay.parse_args(["--max-depth", "2", "--chunk", "10", "--seed", "4",
                                    "--cache", "x.pkl"])
        config = selfplay.build_config(args)
        assert config.search.max_depth == 2
        assert config.search.seed == 4
        assert config.storage.entries_per_chunk == 10
        assert config.storage.cache_file == "x.pkl"


class TestMain:

    def test_random_game_without_cache(self, capsys):
        record = selfplay.main(["--x", "random", "--o", "random", "--seed", "1", "--no-cache"])
        out = capsys.readouterr().out
        assert record.final_state.is_terminal()
        assert "Random  vs  O: Random" in out
        assert "Cache: disabled" in out
        if record.winner is None:
            assert "Draw!" in out
        else:
            assert f"Winner: {record.winner.name}" in out

    def test_cache_is_written_and_reused(self, tmp_path, capsys):
        cache = tmp_path / "cache.json"
        argv = ["--max-depth", "0", "--o", "random", "--seed", "2", "--cache", str(cache)]
        record = selfplay.main(argv)
        assert cache.exists()
        assert record.moves

        out = capsys.readouterr().out
        assert "Best moves: {" in out
        assert "✓ Cache saved" in out

        selfplay.main(argv)
        assert "✓ Cache loaded" in capsys.readouterr().out

    def test_moves_are_printed_in_numpad(self, capsys):
        record = selfplay.main(["--x", "random", "--o", "random", "--seed", "3", "--no-cache"])
        out = capsys.readouterr().out
        assert "X plays" in out
        assert out.count(" plays ") == len(record.moves)

    def test_match_mode(self, capsys):
        result = selfplay.main(["--x", "random", "--o", "random", "--seed", "5", "--no-cache",
                                "--games", "4", "--opening-plies", "2"])
        assert result.games == 4
        assert "Random: " in capsys.readouterr().out
