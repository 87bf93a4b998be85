"""
conftest.py — Shared pytest fixtures for the item specification test suite.

No database or external service fixtures are defined here.  The engine is
pure computation; the HTTP tests use FastAPI's in-process TestClient.

Import-path bootstrapping:
    The ``backend/`` directory is inserted into sys.path so that all
    ``itemspec.*`` imports resolve correctly regardless of where pytest is
    invoked (with or without ``pip install -e .``).
"""

import sys
import os
import pytest

# ---------------------------------------------------------------------------
# Ensure ``backend/`` is on the import path before any itemspec imports occur.
# ---------------------------------------------------------------------------
_BACKEND_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _BACKEND_DIR not in sys.path:
    sys.path.insert(0, _BACKEND_DIR)


# ---------------------------------------------------------------------------
# Engine fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def inference_engine():
    """InferenceEngine with the shipped catalog (stateless)."""
    from itemspec.services.inference_engine import InferenceEngine
    return InferenceEngine()


@pytest.fixture(scope="session")
def catalog_engine():
    """CatalogEngine over the shipped archetype table."""
    from itemspec.services.catalog_engine import CatalogEngine
    return CatalogEngine()


@pytest.fixture(scope="session")
def physics_engine():
    """PhysicsEngine instantiated with no arguments (stateless, pure-math)."""
    from itemspec.services.physics_engine import PhysicsEngine
    return PhysicsEngine()


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def client():
    """TestClient over the full app (routers + middleware)."""
    from fastapi.testclient import TestClient
    from itemspec.main import app
    with TestClient(app) as test_client:
        yield test_client
