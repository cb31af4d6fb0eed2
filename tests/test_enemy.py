import unittest
from unittest.mock import Mock

from config import DIR_L, DIR_R
from entities_enemy import Enemy, EnemyState
from entities_utils import InvalidStateTransition


def fixed_rng(value):
    return Mock(randrange=Mock(return_value=value))


class SpeedTests(unittest.TestCase):
    def test_alive_speeds(self):
        enemy = Enemy()
        self.assertEqual(enemy.speed(), 440.0)
        enemy.start_panic()
        self.assertEqual(enemy.panic_timer, 3.0)
        self.assertEqual(enemy.speed(), 110.0)

    def test_knockout_speed_scales_with_timer_squared(self):
        rng = fixed_rng(1000)
        enemy = Enemy(rng=rng)
        enemy.knockout()
        self.assertEqual(enemy.speed(), 2000.0 * 1.5 ** 2)
        rng.randrange.assert_called_with(2000)

    def test_knockout_speed_jitter(self):
        enemy = Enemy(rng=fixed_rng(0))
        enemy.knockout()
        self.assertEqual(enemy.speed(), 1000.0 * 1.5 ** 2)

    def test_stopped_enemy_has_no_speed(self):
        enemy = Enemy()
        enemy.finish()
        self.assertEqual(enemy.speed(), 0.0)


class PursuitTests(unittest.TestCase):
    def test_pursues_along_shorter_path(self):
        enemy = Enemy((1000.0, 0.0))
        self.assertEqual(enemy.run_ai(player_x=100.0, stage_width=1280), DIR_R)
        enemy.x = 200.0
        self.assertEqual(enemy.run_ai(player_x=100.0, stage_width=1280), DIR_L)

    def test_panic_flees(self):
        enemy = Enemy((1000.0, 0.0))
        enemy.start_panic()
        self.assertEqual(enemy.run_ai(player_x=100.0, stage_width=1280), DIR_L)

    def test_tie_breaks_left_when_pursuing(self):
        enemy = Enemy((0.0, 0.0))
        self.assertEqual(enemy.run_ai(player_x=640.0, stage_width=1280), DIR_L)

    def test_tie_breaks_right_when_panicking(self):
        enemy = Enemy((0.0, 0.0))
        enemy.start_panic()
        self.assertEqual(enemy.run_ai(player_x=640.0, stage_width=1280), DIR_R)

    def test_knocked_out_enemy_ignores_ai(self):
        enemy = Enemy((1000.0, 0.0), rng=fixed_rng(1000))
        enemy.direction = DIR_L
        enemy.knockout()
        enemy.run_ai(player_x=1100.0, stage_width=1280)
        self.assertEqual(enemy.direction, DIR_L)


class UpdateTests(unittest.TestCase):
    def test_alive_moves(self):
        enemy = Enemy((100.0, 0.0))
        enemy.update(0.5)
        self.assertEqual(enemy.x, 320.0)
        self.assertEqual(enemy.leg_anim_timer, 0.5)

    def test_knockout_drifts_then_recovers(self):
        enemy = Enemy((0.0, 0.0), rng=fixed_rng(1000))
        enemy.knockout()
        self.assertEqual(enemy.knockout_timer, 1.5)

        enemy.update(0.5)
        self.assertEqual(enemy.x, 2000.0 * 1.5 ** 2 * 0.5)
        self.assertEqual(enemy.knockout_timer, 1.0)
        self.assertTrue(enemy.knockedout)

        enemy.update(1.0)
        self.assertEqual(enemy.knockout_timer, 0.0)
        self.assertIs(enemy.state, EnemyState.ALIVE)

    def test_panic_drains_and_clamps(self):
        enemy = Enemy()
        enemy.start_panic()
        enemy.update(5.0)
        self.assertEqual(enemy.panic_timer, 0.0)
        self.assertFalse(enemy.panic)

    def test_panic_keeps_draining_while_knocked_out(self):
        enemy = Enemy(rng=fixed_rng(1000))
        enemy.start_panic()
        enemy.knockout()
        enemy.update(1.0)
        self.assertEqual(enemy.panic_timer, 2.0)

    def test_stopped_enemy_stays_put(self):
        enemy = Enemy((400.0, 0.0))
        enemy.finish()
        enemy.update(1.0)
        self.assertEqual(enemy.x, 400.0)
        self.assertIs(enemy.state, EnemyState.STOP)


class TransitionTests(unittest.TestCase):
    def test_knockout_only_from_alive(self):
        enemy = Enemy(rng=fixed_rng(1000))
        enemy.knockout()
        with self.assertRaises(InvalidStateTransition):
            enemy.knockout()
        self.assertIs(enemy.state, EnemyState.KNOCKEDOUT)

    def test_knockout_rejected_when_stopped(self):
        enemy = Enemy()
        enemy.finish()
        with self.assertRaises(InvalidStateTransition):
            enemy.knockout()
        self.assertIs(enemy.state, EnemyState.STOP)

    def test_finish_from_any_state(self):
        enemy = Enemy(rng=fixed_rng(1000))
        enemy.knockout()
        enemy.finish()
        enemy.finish()
        self.assertIs(enemy.state, EnemyState.STOP)

    def test_no_panic_once_stopped(self):
        enemy = Enemy()
        enemy.finish()
        with self.assertRaises(InvalidStateTransition):
            enemy.start_panic()

    def test_unknown_state_rejected(self):
        enemy = Enemy()
        with self.assertRaises(InvalidStateTransition):
            enemy._set_state("Knockedout")
        self.assertIs(enemy.state, EnemyState.ALIVE)

    def test_reset_restores_alive(self):
        enemy = Enemy()
        enemy.start_panic()
        enemy.finish()
        enemy.reset((10.0, 20.0))
        self.assertIs(enemy.state, EnemyState.ALIVE)
        self.assertFalse(enemy.panic)
        self.assertEqual(enemy.direction, DIR_R)
        self.assertEqual(tuple(enemy.pos), (10.0, 20.0))


if __name__ == "__main__":
    unittest.main()
