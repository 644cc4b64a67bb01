import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from stat_functions import config  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_config():
    """Every test starts from the built-in defaults."""
    config.reset_config()
    yield
    config.reset_config()


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")
