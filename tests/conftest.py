import pytest

from lq.config import EngineConfig
from lq.engine import Engine


@pytest.fixture
def engine() -> Engine:
    """Движок со своими реестрами и конфигурацией по умолчанию."""
    return Engine()


@pytest.fixture
def strict_engine() -> Engine:
    """Движок, отвергающий сигналы вне цикла и неопределённые переменные."""
    return Engine(EngineConfig(stray_signal="error", strict_variables=True))
