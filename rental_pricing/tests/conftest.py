import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1].parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def pytest_runtest_setup():
    # PI table is cached per process; tests that swap definitions must not leak
    try:
        from rental_pricing.utils import pi_class

        pi_class.pi_classes.cache_clear()
    except Exception:
        pass
