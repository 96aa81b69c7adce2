import pytest
import os
from unittest.mock import patch, MagicMock

os.environ.setdefault('TESTING', 'true')

from chaintable.app import make_app
from chaintable.hash_table import HashTable


@pytest.fixture
def app():
    app = make_app(capacity=4, load_factor=0.75)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def table():
    return HashTable(4, 0.75)


@pytest.fixture(autouse=True)
def mock_logger():
    with patch('chaintable.logger.logger.logger') as mock_logger:
        mock_logger.info = MagicMock()
        mock_logger.error = MagicMock()
        yield mock_logger


@pytest.fixture
def sample_pairs():
    return {
        1: "a",
        2: "b",
        3: "c",
        4: "d"
    }


@pytest.fixture
def pairs_file(tmp_path):
    path = tmp_path / "pairs.txt"
    path.write_text(
        "1 one\n"
        "2 two words\n"
        "\n"
        "not-a-key value\n"
        "3\n"
        "1 uno\n"
        "-7 negative\n"
    )
    return str(path)
