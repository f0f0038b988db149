from src.school_attendance.school_attendance.common.numbers import percent, round_half_up
from src.school_attendance.school_attendance.common.turma import is_valid_turma, sort_turmas


def test_round_half_up_is_not_bankers_rounding():
    assert round_half_up(2.25, 1) == 2.3
    assert round_half_up(0.05, 1) == 0.1
    assert round_half_up(127.5, 0) == 128


def test_percent_of_zero_is_zero():
    assert percent(3, 0) == 0.0
    assert percent(1, 5) == 20.0


def test_turma_order():
    assert sort_turmas(["10B", "9A", "10A", "9B"]) == ["9A", "9B", "10A", "10B"]


def test_turma_order_puts_odd_labels_last_and_dedups():
    assert sort_turmas(["EJA", "9A", "1A", "9A"]) == ["1A", "9A", "EJA"]


def test_is_valid_turma():
    assert is_valid_turma("9A")
    assert is_valid_turma("10AB")
    assert not is_valid_turma("A9")
    assert not is_valid_turma("")
