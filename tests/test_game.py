import json

import pytest

from lotto_game import create_game
from lotto_game.cli import main
from lotto_game.config import DevelopmentConfig
from lotto_game.models.prize import PrizeTier
from lotto_game.models.ticket import Ticket

from tests.conftest import FakeRandomSource, ScriptedReader

PICKS = [[8, 21, 23, 41, 42, 43], [1, 2, 3, 4, 5, 7], [1, 2, 3, 10, 11, 12]]


def test_full_session(config, writer, output_lines):
    game = create_game(
        config,
        reader=ScriptedReader(["3000", "1,2,3,4,5,6", "7"]),
        writer=writer,
        random_source=FakeRandomSource(PICKS),
    )

    result = game.run()

    assert result.money_spent == 3000
    assert result.tickets == [Ticket(p) for p in PICKS]
    assert result.tally.count(PrizeTier.SECOND) == 1
    assert result.tally.count(PrizeTier.FIFTH) == 1
    assert result.profit_rate == "1000166.7"

    assert "3개를 구매했습니다." in output_lines
    assert "[8, 21, 23, 41, 42, 43]" in output_lines
    assert "당첨 통계\n---" in output_lines
    assert "3개 일치 (5,000원) - 1개" in output_lines
    assert "5개 일치, 보너스 볼 일치 (30,000,000원) - 1개" in output_lines
    assert "6개 일치 (2,000,000,000원) - 0개" in output_lines
    assert output_lines[-1] == "총 수익률은 1000166.7%입니다."


def test_statistics_are_printed_in_ascending_payout_order(config, writer, output_lines):
    game = create_game(
        config,
        reader=ScriptedReader(["1000", "1,2,3,4,5,6", "7"]),
        writer=writer,
        random_source=FakeRandomSource([[40, 41, 42, 43, 44, 45]]),
    )
    game.run()

    header = output_lines.index("당첨 통계\n---")
    assert output_lines[header + 1 : header + 6] == [
        "3개 일치 (5,000원) - 0개",
        "4개 일치 (50,000원) - 0개",
        "5개 일치 (1,500,000원) - 0개",
        "5개 일치, 보너스 볼 일치 (30,000,000원) - 0개",
        "6개 일치 (2,000,000,000원) - 0개",
    ]
    assert output_lines[-1] == "총 수익률은 0.0%입니다."


def test_bad_input_is_reprompted(config, writer, output_lines):
    reader = ScriptedReader(
        [
            "abc",
            "999",
            "1500",
            "2000",
            "1,2,3",
            "1,2,3,4,5,5",
            "1,2,3,4,5,46",
            "1,2,3,4,5,6",
            "6",
            "50",
            "7",
        ]
    )
    game = create_game(config, reader=reader, writer=writer, random_source=FakeRandomSource(PICKS))

    result = game.run()

    errors = [line for line in output_lines if line.startswith("[ERROR]")]
    assert errors == [
        "[ERROR] 숫자를 입력해야 합니다.",
        "[ERROR] 구입 금액은 1,000원 이상이어야 합니다.",
        "[ERROR] 구입 금액은 1,000원 단위여야 합니다.",
        "[ERROR] 로또 번호는 6개여야 합니다.",
        "[ERROR] 로또 번호는 중복될 수 없습니다.",
        "[ERROR] 로또 번호는 1부터 45 사이의 숫자여야 합니다.",
        "[ERROR] 보너스 번호는 당첨 번호와 중복될 수 없습니다.",
        "[ERROR] 로또 번호는 1부터 45 사이의 숫자여야 합니다.",
    ]
    assert result.money_spent == 2000
    assert len(result.tickets) == 2


def test_english_messages(writer, output_lines):
    config = DevelopmentConfig(MESSAGE_LOCALE="en", LOTTO_RANDOM_SEED=None, PROFIT_RATE_DECIMALS=1)
    game = create_game(
        config,
        reader=ScriptedReader(["500", "1000", "1,2,3,4,5,6", "7"]),
        writer=writer,
        random_source=FakeRandomSource([[1, 2, 3, 10, 11, 12]]),
    )
    game.run()

    assert "[ERROR] The purchase amount must be at least 1,000 KRW." in output_lines
    assert "3 matches (5,000 KRW) - 1 tickets" in output_lines
    assert output_lines[-1] == "Total profit rate is 500.0%."


def test_end_of_input_propagates(config, writer):
    game = create_game(config, reader=ScriptedReader(["abc"]), writer=writer)
    with pytest.raises(EOFError):
        game.run()


def test_cli_json_output(monkeypatch, capsys):
    lines = iter(["2000", "1,2,3,4,5,6", "7"])
    monkeypatch.setattr("builtins.input", lambda: next(lines))

    assert main(["--seed", "11", "--json"]) == 0

    out = capsys.readouterr().out
    payload = json.loads(out[out.index("{") :])
    assert payload["money_spent"] == 2000
    assert payload["ticket_count"] == 2
    assert [p["tier"] for p in payload["prizes"]] == ["FIFTH", "FOURTH", "THIRD", "SECOND", "FIRST"]
    assert all(len(t) == 6 for t in payload["tickets"])


def test_cli_returns_1_on_end_of_input(monkeypatch):
    def _closed():
        raise EOFError

    monkeypatch.setattr("builtins.input", _closed)
    assert main([]) == 1
