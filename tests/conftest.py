import pytest

from weblog_analyzer import parse_line

SAMPLE_LINES = [
    "192.168.1.1,2024-02-01 10:15,/home,200,Mozilla/5.0\n",
    "192.168.1.2,2024-02-01 10:16,/products,200,Chrome/90.0\n",
    "192.168.1.3,2024-02-01 10:17,/checkout,500,Safari/13.1\n",
    "192.168.1.10,2024-02-01 10:18,/home,404,Mozilla/5.0\n",
]

# 10.0.0.5 fails four times, 10.0.0.6 exactly three, 10.0.0.7 four (ties 10.0.0.5)
ATTACK_LINES = [
    "10.0.0.5,2024-02-01 11:00,/login,404,curl/8.0",
    "10.0.0.5,2024-02-01 11:00,/admin,404,curl/8.0",
    "10.0.0.5,2024-02-01 11:01,/admin,500,curl/8.0",
    "10.0.0.5,2024-02-01 11:01,/wp-admin,404,curl/8.0",
    "10.0.0.6,2024-02-01 11:02,/login,404,",
    "10.0.0.6,2024-02-01 11:02,/login,404,",
    "10.0.0.6,2024-02-01 11:03,/login,500,",
    "10.0.0.6,2024-02-01 11:03,/login,403,",
    "10.0.0.7,2024-02-01 10:59,/x,500,python-requests/2.31",
    "10.0.0.7,2024-02-01 10:59,/y,500,python-requests/2.31",
    "10.0.0.7,2024-02-01 10:59,/z,404,python-requests/2.31",
    "10.0.0.7,2024-02-01 10:59,/x,404,python-requests/2.31",
    "10.0.0.8,2024-02-01 11:04,/home,200,Mozilla/5.0",
]


@pytest.fixture
def sample_lines():
    return list(SAMPLE_LINES)


@pytest.fixture
def sample_records():
    return [parse_line(line, i) for i, line in enumerate(SAMPLE_LINES, 1)]


@pytest.fixture
def attack_records():
    return [parse_line(line, i) for i, line in enumerate(ATTACK_LINES, 1)]


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "access.log"
    path.write_text("".join(SAMPLE_LINES))
    return path
