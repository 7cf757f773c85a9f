import json

import pytest

import main


def _run_json(capsys, *argv):
    code = main.main([*argv, "--json"])
    return code, json.loads(capsys.readouterr().out)


def test_bankroll_split_as_json(capsys):
    code, out = _run_json(capsys, "--odds", "2.1", "2.1", "--bankroll", "1000")
    assert code == 0
    assert out["valid"] is True
    assert out["stakes"] == [500.0, 500.0]
    assert out["profits"] == [50.0, 50.0]
    assert out["arbitrage"]["isArb"] is True
    assert out["roi"]["mode"] == "recipient"


def test_fixed_row_from_cli(capsys):
    code, out = _run_json(
        capsys, "--odds", "2", "3", "--recipients", "0", "--fixed", "0", "--stake", "0=600",
    )
    assert code == 0
    assert out["stakes"] == [600.0, 300.0]
    assert out["total"] == 900.0
    assert out["roi"] == {"value": pytest.approx(1 / 3), "refRowIndex": 0, "mode": "fixed"}


def test_manual_stake_from_cli(capsys):
    code, out = _run_json(capsys, "--odds", "2", "2", "--stake", "1=200")
    assert out["stakes"] == [500.0, 200.0]
    assert out["bankroll"] == 700.0


def test_invalid_position_exits_nonzero(capsys):
    code, out = _run_json(capsys, "--odds", "2", "2", "--recipients")
    assert code == 1
    assert out["valid"] is False
    assert out["payouts"] is None
    assert {"code": "NO_RECIPIENT_ROW", "row": None} in out["issues"]


def test_bad_odds_text_is_reported(capsys):
    code, out = _run_json(capsys, "--odds", "abc", "2")
    assert code == 1
    assert out["rowErrors"][0]["oddsError"]


def test_out_of_range_index_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main.main(["--odds", "2", "2", "--fixed", "5"])
    assert exc.value.code == 2


def test_malformed_stake_argument(capsys):
    with pytest.raises(SystemExit):
        main.main(["--odds", "2", "2", "--stake", "600"])


def test_table_output(capsys):
    assert main.main(["--odds", "2.1", "2.1"]) == 0
    out = capsys.readouterr().out
    assert "Total staked" in out
    assert "ARB: yes" in out


def test_one_row_per_odds_value(capsys):
    code, data = _run_json(capsys, "--odds", "3", "3", "3", "--bankroll", "300")
    assert code == 0
    assert data["stakes"] == [100.0, 100.0, 100.0]
    assert len(data["rowErrors"]) == 3
