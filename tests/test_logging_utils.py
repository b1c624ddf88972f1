# -*- coding: utf-8 -*-
import logging

from starbattle.csp.search import solve_battle_grid
from starbattle.logging_utils import LOGGER_NAME, get_logger, set_log_level


def test_component_loggers_are_children_of_the_package_logger():
    root = get_logger()
    search = get_logger("search")

    assert root.name == LOGGER_NAME
    assert search.name == "starbattle.search"
    assert search.parent is root
    assert not search.handlers
    assert len(root.handlers) == 1


def test_set_log_level_reaches_component_loggers():
    root = get_logger()
    previous = root.level
    try:
        set_log_level(logging.DEBUG)
        assert get_logger("search").getEffectiveLevel() == logging.DEBUG
        set_log_level(logging.WARNING)
        assert get_logger("cli").getEffectiveLevel() == logging.WARNING
    finally:
        root.setLevel(previous)


def test_prunes_are_logged_by_the_search_logger(tight_grid14, caplog):
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        solve_battle_grid(tight_grid14)

    prunes = [r for r in caplog.records if r.getMessage().startswith("prune at cell")]
    assert prunes
    assert {r.name for r in prunes} == {"starbattle.search"}
