from __future__ import annotations

import pytest

from checkers_engine import Color, Evaluator, EvaluatorConfig, create_initial_board

from conftest import B, BK, W, WK, make_board


def test_initial_position_is_balanced():
    evaluator = Evaluator()
    board = create_initial_board()
    assert evaluator.evaluate(board, Color.WHITE) == pytest.approx(0.0)
    assert evaluator.evaluate(board, Color.BLACK) == pytest.approx(0.0)


def test_king_is_worth_five():
    board = make_board({(0, 1): BK})
    evaluator = Evaluator()
    assert evaluator.evaluate(board, Color.BLACK) == pytest.approx(5.0)
    assert evaluator.evaluate(board, Color.WHITE) == pytest.approx(-5.0)


def test_advancement_and_center_bonus():
    evaluator = Evaluator()
    # three rows advanced, column 2 is central
    assert evaluator.evaluate(make_board({(3, 2): B}), Color.BLACK) == pytest.approx(1.5)
    # two rows advanced, edge column
    assert evaluator.evaluate(make_board({(5, 0): W}), Color.WHITE) == pytest.approx(1.2)


def test_kings_get_no_advancement_bonus():
    evaluator = Evaluator()
    assert evaluator.evaluate(make_board({(7, 4): WK}), Color.WHITE) == pytest.approx(5.2)
    assert evaluator.evaluate(make_board({(0, 7): WK}), Color.WHITE) == pytest.approx(5.0)


def test_score_is_own_minus_opponent():
    board = make_board({(3, 2): B, (5, 0): W})
    evaluator = Evaluator()
    assert evaluator.evaluate(board, Color.BLACK) == pytest.approx(0.3)
    assert evaluator.evaluate(board, Color.WHITE) == pytest.approx(-0.3)


def test_custom_weights():
    evaluator = Evaluator(EvaluatorConfig(king_value=3.0, center_bonus=0.0))
    assert evaluator.evaluate(make_board({(3, 4): WK}), Color.WHITE) == pytest.approx(3.0)
