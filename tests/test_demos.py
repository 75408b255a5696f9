import math

import pytest

from education.demos import main
from education.gcd import gcd
from education.power import ipow


def test_binary_search_demo(capsys):
    assert main(["binary_search"]) == 0
    assert capsys.readouterr().out == "Gotcha: 10==10\n"


def test_gcd_demo(capsys):
    main(["gcd"])
    assert capsys.readouterr().out == f"{gcd(1234567890, 2)}\n"


def test_power_demo(capsys):
    main(["power"])
    out = capsys.readouterr().out
    assert out == f"{ipow(1.000001, 1_000_000)}\n"
    assert abs(float(out) - math.e) < 1e-5


def test_queue_demo(capsys):
    main(["queue_with_priorities"])
    assert capsys.readouterr().out == "27\n23\n55\n58\n21\nNone\n"


def test_stack_demo(capsys):
    main(["stack"])
    assert capsys.readouterr().out == "34\n23\nNone\n"


def test_sorting_demo(capsys):
    main(["sorting"])
    lines = capsys.readouterr().out.splitlines()
    labels = ["Bubble Sort", "Selection Sort", "Insertion Sort",
              "Heapsort", "Quicksort", "Mergesort"]
    assert len(lines) == len(labels)
    for line, label in zip(lines, labels):
        assert line.startswith(label + " [")
        body = line[len(label) + 2 : -1]
        values = [int(x) for x in body.split(", ")]
        assert len(values) == 30
        assert values == sorted(values)
        assert all(0 <= v < 30 for v in values)


def test_several_demos_in_order(capsys):
    main(["stack", "binary_search"])
    assert capsys.readouterr().out.splitlines()[-1].startswith("Gotcha")


def test_unknown_demo_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["nonexistent"])
    assert excinfo.value.code == 2
    capsys.readouterr()