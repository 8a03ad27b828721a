"""Todo list providers.

Resolution order: HTTP API, MySQL, the file named by todos_file, then
todos.txt in the working directory. The chain default is an empty list.
"""

import logging
from pathlib import Path
from typing import List, Optional

from termclock.config.settings import Config
from termclock.shared.database import DashboardStorage, DBConfig
from termclock.shared.errors import ConfigurationAbsent, ProtocolFailure, TransportFailure
from termclock.shared import http
from termclock.shared.models import (
    ApiResponse,
    TodoRow,
    format_deadline,
    format_todo_line,
    truncate_task,
)

from .base import ProviderChain

logger = logging.getLogger(__name__)

TODO_PATH = "/todo/list"
DEFAULT_TODOS_FILE = "todos.txt"
STATUS_PENDING = 0
DB_TASK_CHARS = 80


def _finish(lines: List[str], config: Config) -> List[str]:
    return [truncate_task(line, config.todo_task_max_chars) for line in lines]


def read_todo_lines(text: str) -> List[str]:
    """Split file contents into trimmed, non-empty lines."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def fetch_todos_api(base_url: str, limit: int) -> List[str]:
    """Fetch pending todos from the HTTP API as display lines.

    Raises:
        TransportFailure: If the API cannot be reached.
        ProtocolFailure: On a non-zero code or a malformed body.
    """
    payload = {"status": [STATUS_PENDING], "page": {"num": 1, "size": limit}}
    body = http.ApiClient(base_url).post_json(TODO_PATH, payload)
    response = ApiResponse.parse(body, TodoRow.from_dict)

    if not response.ok:
        raise ProtocolFailure(f"API returned code {response.code}: {response.msg}")

    return [row.display_line() for row in response.rows]


def from_api(config: Config) -> Optional[List[str]]:
    if not config.api_base_url:
        raise ConfigurationAbsent("api_base_url not configured")
    return _finish(fetch_todos_api(config.api_base_url, config.todo_limit), config)


def from_mysql(config: Config) -> Optional[List[str]]:
    url = config.todo_database_url
    if not url:
        raise ConfigurationAbsent("todo_db_url/mysql_url not configured")
    try:
        db_config = DBConfig.from_url(url)
    except ValueError as e:
        raise ConfigurationAbsent(f"Unusable todo database URL: {e}", e) from e

    rows = DashboardStorage(db_config).get_pending_todos(
        limit=config.todo_limit,
        ip_filter=config.todo_ip_filter,
        max_task_chars=DB_TASK_CHARS,
    )
    lines = [format_todo_line(format_deadline(update_time), task) for task, update_time in rows]
    return _finish(lines, config)


def _from_file(path: Path, config: Config) -> List[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigurationAbsent(f"No todo file at {path}", e) from e
    except (OSError, UnicodeDecodeError) as e:
        raise TransportFailure(f"Could not read {path}: {e}", e) from e
    return _finish(read_todo_lines(text), config)


def from_todos_file(config: Config) -> Optional[List[str]]:
    if not config.todos_file:
        raise ConfigurationAbsent("todos_file not configured")
    return _from_file(Path(config.todos_file), config)


def from_default_file(config: Config) -> Optional[List[str]]:
    return _from_file(Path(DEFAULT_TODOS_FILE), config)


def build_todo_chain() -> ProviderChain[List[str]]:
    return ProviderChain(
        "todos",
        [
            ("api", from_api),
            ("mysql", from_mysql),
            ("todos_file", from_todos_file),
            ("default_file", from_default_file),
        ],
        default=[],
    )
