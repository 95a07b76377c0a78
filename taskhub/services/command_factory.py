from __future__ import annotations

from typing import Any, Iterable

from taskhub.domain.enums import CommandType
from taskhub.infra.repository import TaskRepository

from .commands import Command, CreateTaskCommand, DeleteTaskCommand, UpdateTaskCommand
from .notifications import TaskObserver


class CommandError(ValueError):
    pass


class UnknownCommandError(CommandError):
    pass


class MissingObserverError(CommandError):
    pass


class MissingParameterError(CommandError):
    pass


class InvalidParameterError(CommandError):
    pass


_FIELD_TYPES: dict[str, type | tuple[type, ...]] = {
    "title": str,
    "type": str,
    "description": (str, type(None)),
    "priority": (str, type(None)),
    "completed": bool,
}


def _require(params: dict[str, Any], *names: str) -> None:
    missing = [name for name in names if params.get(name) in (None, "")]
    if missing:
        raise MissingParameterError(f"Missing command parameters: {', '.join(missing)}")


def _check_fields(fields: dict[str, Any]) -> None:
    """Reject task fields whose values the store cannot hold."""
    for name, value in fields.items():
        expected = _FIELD_TYPES.get(name)
        if expected is not None and not isinstance(value, expected):
            raise InvalidParameterError(f"Invalid value for {name}: {value!r}")


def _check_updates(updates: Any) -> dict[str, Any]:
    if updates is None:
        return {}
    if not isinstance(updates, dict):
        raise InvalidParameterError(f"Updates must be an object, got {type(updates).__name__}")
    _check_fields(updates)
    return updates


class CommandFactory:
    @staticmethod
    def create_command(
        command_type: CommandType | str,
        params: dict[str, Any],
        repository: TaskRepository,
        observer: TaskObserver | None = None,
        strict_types: bool = False,
    ) -> Command:
        try:
            kind = CommandType(command_type)
        except ValueError:
            raise UnknownCommandError(f"Unknown command type: {command_type}") from None

        if kind is CommandType.CREATE:
            if observer is None:
                raise MissingObserverError("Observer required for create command")
            _require(params, "title", "type")
            _check_fields({key: params[key] for key in _FIELD_TYPES if key in params})
            return CreateTaskCommand(
                params["title"],
                params["type"],
                repository,
                observer,
                description=params.get("description"),
                priority=params.get("priority"),
                strict_types=strict_types,
            )
        if kind is CommandType.DELETE:
            _require(params, "task_id")
            return DeleteTaskCommand(str(params["task_id"]), repository)

        _require(params, "task_id")
        return UpdateTaskCommand(str(params["task_id"]), _check_updates(params.get("updates")), repository)

    @classmethod
    def create_batch_command(
        cls,
        specs: Iterable[dict[str, Any]],
        repository: TaskRepository,
        observer: TaskObserver | None = None,
        strict_types: bool = False,
    ) -> list[Command]:
        return [
            cls.create_command(
                spec.get("type", ""),
                spec.get("params") or {},
                repository,
                observer,
                strict_types=strict_types,
            )
            for spec in specs
        ]
