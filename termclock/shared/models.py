"""Core data models for API payloads and todo items."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Generic, List, Optional, TypeVar, Union

from .errors import ProtocolFailure

RowT = TypeVar("RowT")

ELLIPSIS = "…"
CELSIUS = "℃"


@dataclass
class TemperatureValues:
    """Sensor values reported for one temperature row."""
    temp: float


@dataclass
class TemperatureRow:
    """A single row of the temperature list endpoint.

    Only the reading is kept; the row's other fields are not displayed.
    """
    values: TemperatureValues

    @classmethod
    def from_dict(cls, row: dict) -> "TemperatureRow":
        temp = row["values"]["temp"]
        if isinstance(temp, bool) or not isinstance(temp, (int, float)):
            raise TypeError(f"temp is not a number: {temp!r}")
        return cls(values=TemperatureValues(temp=float(temp)))


@dataclass
class TodoRow:
    """A single row of the todo list endpoint."""
    deadline: str
    task: str

    @classmethod
    def from_dict(cls, row: dict) -> "TodoRow":
        return cls(deadline=str(row["deadline"]), task=str(row["task"]))

    def display_line(self) -> str:
        return format_todo_line(self.deadline, self.task)


@dataclass
class ApiResponse(Generic[RowT]):
    """The {code, msg, data: {rows, ...}} envelope shared by the HTTP API.

    A code of 0 means success.
    """
    code: int
    msg: str = ""
    rows: List[RowT] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.code == 0

    @classmethod
    def parse(cls, payload: Any, row_parser: Callable[[dict], RowT]) -> "ApiResponse[RowT]":
        """Validate a decoded JSON payload into a typed response.

        Raises:
            ProtocolFailure: If the payload does not have the expected shape.
        """
        try:
            code = payload["code"]
            if isinstance(code, bool) or not isinstance(code, int):
                raise TypeError(f"code is not an integer: {code!r}")
            if code != 0:
                # Failed responses may omit data entirely
                return cls(code=code, msg=str(payload.get("msg", "")))
            rows = [row_parser(row) for row in payload["data"]["rows"]]
            return cls(code=code, msg=str(payload.get("msg", "")), rows=rows)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ProtocolFailure(f"Malformed API payload: {e}", e) from e


def format_celsius(value: float) -> str:
    """Format a reading as the cached display string, e.g. 23.4 -> "23.4℃"."""
    return f"{value:.1f}{CELSIUS}"


def format_todo_line(deadline: str, task: str) -> str:
    return f"{deadline} | {task}"


def truncate_task(text: str, max_chars: Optional[int]) -> str:
    """Cut text to max_chars characters, marking the cut with an ellipsis."""
    if max_chars is None or len(text) <= max_chars:
        return text
    return text[:max_chars] + ELLIPSIS


def format_deadline(epoch: Union[int, datetime, None]) -> str:
    """Format a database update time as local "%Y-%m-%d %H:%M:%S".

    The column holds either epoch seconds or epoch milliseconds; values above
    10_000_000_000 are taken as milliseconds. Non-positive values give "--".
    """
    if isinstance(epoch, datetime):
        return epoch.strftime("%Y-%m-%d %H:%M:%S")
    if epoch is None or epoch <= 0:
        return "--"
    epoch_s = epoch // 1000 if epoch > 10_000_000_000 else epoch
    try:
        return datetime.fromtimestamp(epoch_s).strftime("%Y-%m-%d %H:%M:%S")
    except (OverflowError, OSError, ValueError):
        return "--"
