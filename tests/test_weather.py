"""
Tests for agent_programs.envs.weather - weather/window percepts and actions.
"""
import pytest

from agent_programs.agents.reflex_agent import SimpleReflexAgent
from agent_programs.agents.table_agent import TableDrivenAgent, TableTooLargeError, table_size
from agent_programs.envs.weather import Weather, Window, weather_table, window_rule


class TestWeatherWorld:
    """Percepts, actions and the condition-action rule."""

    def test_window_rule(self):
        """Sunny -> Open, Rainy -> Close."""
        assert window_rule(Weather.SUNNY) is Window.OPEN
        assert window_rule(Weather.RAINY) is Window.CLOSE

    def test_percepts_are_hashable(self):
        """Weather values can form table keys."""
        assert len({(Weather.SUNNY,), (Weather.SUNNY,), (Weather.RAINY,)}) == 2

    def test_weather_table_size(self):
        """The complete table follows the growth law."""
        for horizon in range(1, 6):
            assert len(weather_table(horizon)) == table_size(2, horizon)

    def test_weather_table_bound(self):
        """max_entries is forwarded to table generation."""
        with pytest.raises(TableTooLargeError):
            weather_table(20, max_entries=1000)


class TestStrategiesAgree:
    """Within the table's lifetime both programs act identically."""

    def test_same_actions_up_to_horizon(self):
        """Table and reflex agents match on every step of a covered stream."""
        stream = [Weather.SUNNY, Weather.RAINY, Weather.RAINY, Weather.SUNNY]
        table_agent = TableDrivenAgent(weather_table(len(stream)))
        reflex_agent = SimpleReflexAgent.from_rule(window_rule)

        assert [table_agent.run(p) for p in stream] == [reflex_agent.run(p) for p in stream]
