"""Pytest fixtures for Quantum Hotel tests."""

import random

import pytest
from quantum_hotel import CompanionAgent, EngineConfig, HotelSession, SuperpositionEngine


@pytest.fixture
def engine():
    """Create a fresh engine for testing."""
    return SuperpositionEngine(EngineConfig(seed=1234))


@pytest.fixture
def seeded_engine(engine):
    """Engine with two pending decisions registered."""
    engine.create_superposition("room", ["101", "102", "103"])
    engine.create_superposition("key", ["spin up", "spin down"])
    return engine


@pytest.fixture
def companion():
    return CompanionAgent()


@pytest.fixture
def session(engine, companion):
    return HotelSession(engine=engine, companion=companion)


@pytest.fixture
def rng():
    return random.Random(42)
