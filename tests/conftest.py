"""Shared fixtures: a core stage carrying a booster set."""
import pytest

from rocketlayout import AxialStage, BoosterSet, ComponentTree


@pytest.fixture
def tree():
    return ComponentTree("Test vehicle")


@pytest.fixture
def core(tree):
    return tree.root.add_child(AxialStage("Core", length=4.0))


@pytest.fixture
def boosters(core):
    booster_set = BoosterSet(3, name="Boosters", length=2.0)
    core.add_child(booster_set)
    return booster_set


@pytest.fixture
def events(tree):
    received = []
    tree.add_listener(received.append)
    return received
