import random
import unittest
from fair_dice.agents import AGENT_MAP, create_agent
from fair_dice.agents.counter_agent import CounterAgent
from fair_dice.agents.random_agent import RandomAgent
from fair_dice.core.dice_set import parse_dice_set
from fair_dice.core.probability import ProbabilityMatrix


class TestAgents(unittest.TestCase):
    """
    Tests for the computer's die-selection agents:
      - Registration via @register_agent.
      - RandomAgent never takes the user's die unless sharing is allowed.
      - CounterAgent answers with the die most likely to beat the user's.
    """

    def setUp(self):
        self.dice_set = parse_dice_set(["2,2,4,4,9,9", "1,1,6,6,8,8", "3,3,5,5,7,7"])
        self.matrix = ProbabilityMatrix(self.dice_set)

    def test_registry(self):
        self.assertIn("random", AGENT_MAP)
        self.assertIn("counter", AGENT_MAP)
        self.assertIsInstance(create_agent("Counter"), CounterAgent)
        with self.assertRaises(ValueError):
            create_agent("oracle")

    def test_random_agent_avoids_taken_die(self):
        agent = RandomAgent(rng=random.Random(5))
        for _ in range(100):
            self.assertNotEqual(agent.choose_die(self.dice_set, self.matrix, taken=1), 1)

    def test_random_agent_picks_first_from_all(self):
        agent = RandomAgent(rng=random.Random(5))
        picks = {agent.choose_die(self.dice_set, self.matrix) for _ in range(200)}
        self.assertEqual(picks, {0, 1, 2})

    def test_random_agent_may_share_when_allowed(self):
        agent = RandomAgent(rng=random.Random(5))
        picks = {agent.choose_die(self.dice_set, self.matrix, taken=1, allow_shared=True) for _ in range(200)}
        self.assertIn(1, picks)

    def test_counter_agent_beats_user_choice(self):
        agent = CounterAgent(rng=random.Random(1))
        self.assertEqual(agent.choose_die(self.dice_set, self.matrix, taken=0), 2)
        self.assertEqual(agent.choose_die(self.dice_set, self.matrix, taken=1), 0)
        self.assertEqual(agent.choose_die(self.dice_set, self.matrix, taken=2), 1)


if __name__ == '__main__':
    unittest.main()
