import math

import pytest

from numlib.examples import main, run_all_examples


def test_main_succeeds(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Wszystkie przyklady zostaly wykonane pomyslnie" in out


def test_categories_in_order(capsys):
    run_all_examples()
    out = capsys.readouterr().out
    headers = [
        "Algebra Liniowa",
        "Interpolacja",
        "Aproksymacja",
        "Calkowanie",
        "Rownania Rozniczkowe",
        "Rownania Nieliniowe",
    ]
    positions = [out.index(h) for h in headers]
    assert positions == sorted(positions)


def test_interpolation_examples_hit_exact_value(capsys):
    run_all_examples()
    out = capsys.readouterr().out
    assert out.count("Wynik: 7.000000 (dokladnie: 7.0)") == 2


def test_simpson_example_is_exact(capsys):
    run_all_examples()
    out = capsys.readouterr().out
    assert "Wynik: 8.000000 (dokladnie: 8.0)" in out


def test_root_examples_match_sqrt5(capsys):
    run_all_examples()
    out = capsys.readouterr().out
    root = f"{math.sqrt(5.0):.6f}"
    assert out.count(f"Wynik: {root} (dokladnie: {root})") == 2


def test_help_exits(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "numlib-examples" in capsys.readouterr().out