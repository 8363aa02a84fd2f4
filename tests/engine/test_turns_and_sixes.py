import unittest

from parchis.board import Board
from parchis.dice import ScriptedDice
from parchis.exceptions import PegStateError
from parchis.peg import Peg
from parchis.player import Player
from parchis.turn import TurnEngine
from parchis.types import EventKind, TurnPhase

ACTIONS = (EventKind.INSERT, EventKind.MOVE, EventKind.MOVE_HOME, EventKind.NO_MOVE)


class HighestPegStrategy:
    name = "highest"

    def select_peg(self, player, candidates, roll):
        return max(candidates)


class ReservePegStrategy:
    name = "broken"

    def select_peg(self, player, candidates, roll):
        return 0


class TestTurnEngine(unittest.TestCase):
    def setUp(self):
        self.board = Board()
        self.blue = Player(0)

    def engine(self, rolls, **kwargs):
        return TurnEngine(board=self.board, dice=ScriptedDice(rolls), **kwargs)

    def actions(self, record):
        return [ev.kind for ev in record.events if ev.kind in ACTIONS]

    def test_six_inserts_then_moves_inserted_peg(self):
        record = self.engine([6, 3]).perform_turn(self.blue)
        self.assertEqual(record.rolls, [6, 3])
        self.assertEqual(
            [ev.kind for ev in record.events],
            [EventKind.ROLL, EventKind.INSERT, EventKind.ROLL, EventKind.MOVE],
        )
        self.assertEqual(self.board.peg(self.blue, 0), Peg.on_track(3))
        self.assertEqual(self.board.cell(0), 0)
        self.assertEqual(self.board.cell(3), self.blue.marker)

    def test_non_six_without_pegs_on_track_is_no_op(self):
        record = self.engine([4]).perform_turn(self.blue)
        self.assertEqual(self.actions(record), [EventKind.NO_MOVE])
        self.assertTrue(all(pg.is_reserve for pg in self.board.player_pegs(self.blue)))
        self.assertTrue(all(v == 0 for v in self.board.cells()))

    def test_non_six_ends_turn_after_one_action(self):
        self.board.place_peg(5, self.blue, 0)
        dice = ScriptedDice([2, 6, 6])
        record = TurnEngine(board=self.board, dice=dice).perform_turn(self.blue)
        self.assertEqual(record.rolls, [2])
        self.assertEqual(len(self.actions(record)), 1)
        self.assertEqual(dice.remaining, 2)

    def test_second_six_inserts_over_first_inserted_peg(self):
        record = self.engine([6, 6, 2]).perform_turn(self.blue)
        self.assertTrue(self.board.peg(self.blue, 0).is_reserve)
        self.assertEqual(self.board.peg(self.blue, 1), Peg.on_track(2))
        self.assertEqual(self.board.cell(0), 0)
        self.assertEqual(len(record.captures), 1)
        self.assertEqual(record.captures[0].victim_seat, self.blue.seat)

    def test_six_without_reserve_moves_inserted_peg(self):
        for peg_index, pos in ((1, 20), (2, 25), (3, 15)):
            self.board.place_peg(pos, self.blue, peg_index)
        record = self.engine([6, 6, 1]).perform_turn(self.blue)
        self.assertEqual(
            self.actions(record), [EventKind.INSERT, EventKind.MOVE, EventKind.MOVE]
        )
        self.assertEqual(self.board.peg(self.blue, 0), Peg.on_track(7))
        self.assertEqual(self.board.peg(self.blue, 3), Peg.on_track(15))

    def test_free_move_uses_lowest_index_by_default(self):
        self.board.place_peg(12, self.blue, 1)
        self.board.place_peg(5, self.blue, 2)
        self.engine([4]).perform_turn(self.blue)
        self.assertEqual(self.board.peg(self.blue, 1), Peg.on_track(16))
        self.assertEqual(self.board.peg(self.blue, 2), Peg.on_track(5))

    def test_free_move_uses_seat_strategy(self):
        self.board.place_peg(12, self.blue, 1)
        self.board.place_peg(5, self.blue, 2)
        engine = self.engine([4], strategies={0: HighestPegStrategy()})
        engine.perform_turn(self.blue)
        self.assertEqual(self.board.peg(self.blue, 1), Peg.on_track(12))
        self.assertEqual(self.board.peg(self.blue, 2), Peg.on_track(9))

    def test_strategy_picking_unmovable_peg_is_contract_violation(self):
        self.board.place_peg(12, self.blue, 1)
        engine = self.engine([4], default_strategy=ReservePegStrategy())
        with self.assertRaises(PegStateError):
            engine.perform_turn(self.blue)

    def test_insert_has_priority_over_free_move(self):
        self.board.place_peg(12, self.blue, 0)
        self.engine([6, 1]).perform_turn(self.blue)
        self.assertEqual(self.board.peg(self.blue, 0), Peg.on_track(12))
        self.assertEqual(self.board.peg(self.blue, 1), Peg.on_track(1))

    def test_finished_player_rolls_without_acting(self):
        for peg_index in range(4):
            self.board.place_peg(27, self.blue, peg_index)
            self.board.move_peg(self.blue, peg_index, 3)
        record = self.engine([6, 5]).perform_turn(self.blue)
        self.assertEqual(self.actions(record), [EventKind.NO_MOVE, EventKind.NO_MOVE])


class TestTurnPhases(unittest.TestCase):
    def test_step_walks_the_state_machine(self):
        board = Board()
        engine = TurnEngine(board=board, dice=ScriptedDice([6, 3]))
        engine.begin(Player(2))
        self.assertEqual(engine.phase, TurnPhase.ROLL)
        self.assertEqual(engine.step(), TurnPhase.MANDATORY_INSERT)
        self.assertEqual(engine.step(), TurnPhase.ROLL)
        self.assertEqual(engine.inserted, 0)
        self.assertEqual(engine.step(), TurnPhase.MANDATORY_MOVE_INSERTED)
        self.assertEqual(engine.step(), TurnPhase.TURN_END)
        self.assertIsNone(engine.inserted)
        self.assertEqual(board.peg(Player(2), 0), Peg.on_track(23))
        with self.assertRaises(RuntimeError):
            engine.step()

    def test_free_move_and_no_action_phases(self):
        board = Board()
        engine = TurnEngine(board=board, dice=ScriptedDice([3, 3]))
        engine.begin(Player(1))
        self.assertEqual(engine.step(), TurnPhase.NO_ACTION)
        self.assertEqual(engine.step(), TurnPhase.TURN_END)

        board.place_peg(11, Player(1), 3)
        engine.begin(Player(1))
        self.assertEqual(engine.step(), TurnPhase.FREE_MOVE)
        self.assertEqual(engine.step(), TurnPhase.TURN_END)
        self.assertEqual(board.peg(Player(1), 3), Peg.on_track(14))

    def test_invalid_die_value_rejected(self):
        engine = TurnEngine(board=Board(), dice=lambda: 7)
        with self.assertRaises(ValueError):
            engine.perform_turn(Player(0))

    def test_step_before_begin_fails(self):
        with self.assertRaises(RuntimeError):
            TurnEngine(board=Board()).step()


if __name__ == "__main__":
    unittest.main()
