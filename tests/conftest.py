"""Pytest configuration for ray tracer tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Camera ray generation and canvas quantization run as Taichi kernels;
    repeated ti.init() calls would reset compiled kernels between tests.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield


@pytest.fixture
def world():
    """The default two-sphere world."""
    from src.tracer.scene.world import default_world

    return default_world()


@pytest.fixture
def sphere():
    """A unit sphere with default transform and material."""
    from src.tracer.geometry.sphere import Sphere

    return Sphere()
