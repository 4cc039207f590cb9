"""Tests for the command-line entry point."""

import json

from playing_cards.main import build_parser, main


class TestMain:
    """Tests for main."""

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.config is None
        assert args.deal is None
        assert not args.no_shuffle

    def test_deal_some(self, capsys):
        """Test dealing part of a Euchre deck."""
        assert main(["-t", "euchre", "-n", "3", "--seed", "1"]) == 0
        out = capsys.readouterr().out
        assert "Deck: Euchre x 1" in out
        assert "Dealt 3 cards, 21 remaining" in out

    def test_deal_all_unshuffled(self, capsys):
        assert main(["--no-shuffle", "-j", "1"]) == 0
        out = capsys.readouterr().out
        assert "1. Ace of Hearts (value 1)" in out
        assert "Joker (Unsuited)" in out
        assert "Dealt 53 cards, 0 remaining" in out

    def test_deal_past_end(self, capsys):
        assert main(["-t", "euchre", "-n", "30"]) == 0
        out = capsys.readouterr().out
        assert "No cards left" in out
        assert "Dealt 24 cards, 0 remaining" in out

    def test_invalid_jokers(self):
        assert main(["-j", "-1"]) == 1

    def test_config_file(self, tmp_path, capsys):
        path = tmp_path / "config.yaml"
        path.write_text("shoe:\n  deck_type: pinochle\n  num_decks: 2\n")
        assert main(["-c", str(path), "-n", "0"]) == 0
        out = capsys.readouterr().out
        assert "Deck: Pinochle x 2" in out
        assert "Cards: 96" in out

    def test_deal_log(self, tmp_path):
        path = tmp_path / "deals.jsonl"
        assert main(["--no-shuffle", "-n", "2", "--deal-log", str(path)]) == 0
        with open(path, encoding="utf-8") as f:
            events = [json.loads(line) for line in f]
        assert [e["type"] for e in events] == ["shoe_created", "deal", "deal"]
        assert events[2]["card"] == "2H"
